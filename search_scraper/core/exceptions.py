"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class ScraperException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 크롤러 관련 예외
class CrawlerException(ScraperException):
    """크롤러 관련 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "CRAWLER_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CRAWLER_ERROR", details)


class BrowserException(CrawlerException):
    """브라우저 실행 오류"""
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, "BROWSER_ERROR", details)


class NavigationException(CrawlerException):
    """페이지 로드 실패 (네트워크, 타임아웃, DNS)"""
    def __init__(self, url: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Navigation to {url} failed: {reason}"
        super().__init__(message, "NAVIGATION_FAILED",
                        details or {"url": url, "reason": reason})
        self.url = url


class ExtractionException(CrawlerException):
    """DOM 추출 실패 또는 잘못된 형태의 결과"""
    def __init__(self, engine: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to extract {engine} results: {reason}"
        super().__init__(message, "EXTRACTION_FAILED",
                        details or {"engine": engine, "reason": reason})


# 요청 라우팅 관련 예외
class UnknownEngineException(ScraperException):
    """등록되지 않은 검색 엔진"""
    def __init__(self, engine: str, details: Optional[dict[str, Any]] = None):
        message = f"Unknown search engine: {engine}"
        super().__init__(message, "UNKNOWN_ENGINE", details or {"engine": engine})
        self.engine = engine


class UnknownToolException(ScraperException):
    """등록되지 않은 도구 이름"""
    def __init__(self, name: str, details: Optional[dict[str, Any]] = None):
        message = f"Tool {name} not found"
        super().__init__(message, "UNKNOWN_TOOL", details or {"name": name})
        self.name = name


# 유효성 검증 관련 예외
class ValidationException(ScraperException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


# 저장 관련 예외
class PersistenceException(ScraperException):
    """스냅샷 파일 저장 실패"""
    def __init__(self, path: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to write snapshot to {path}: {reason}"
        super().__init__(message, "PERSISTENCE_ERROR",
                        details or {"path": path, "reason": reason})


# 재시도 관련 예외
class RetryExhaustedException(ScraperException):
    """재시도 정책이 결과도, 전달할 오류도 없이 끝난 경우"""
    def __init__(self, operation: str, attempts: int, details: Optional[dict[str, Any]] = None):
        message = f"Operation '{operation}' did not run successfully after {attempts} attempt(s)"
        super().__init__(message, "RETRY_EXHAUSTED",
                        details or {"operation": operation, "attempts": attempts})
