"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 브라우저
    browser_headless: bool = True
    # page.goto 기본 타임아웃 (domcontentloaded 까지)
    browser_timeout_ms: int = 30000

    # 크롤러
    crawler_user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    # 검색 결과 페이지에서 이미지/폰트/미디어 요청 차단
    crawler_block_resources: bool = True

    # 네비게이션 재시도 (고정 간격)
    retry_max_attempts: int = 3
    retry_delay_ms: int = 1000

    # 추출 방식
    # - dom: 페이지 컨텍스트에서 JS 추출기 실행
    # - html: 렌더링된 DOM을 직렬화해서 selectolax로 파싱
    extraction_mode: str = "dom"

    # 마지막 검색 결과 스냅샷 (매 요청마다 덮어씀)
    snapshot_path: str = "search_results.json"

    # API
    api_title: str = "Search Scraper"
    api_version: str = "1.0.0"
    api_description: str = "Headless browser scraper for web, video and literature search."
    api_host: str = "127.0.0.1"
    api_port: int = 3000

    # 로깅
    log_level: str = "INFO"

    @field_validator("browser_timeout_ms", "retry_delay_ms")
    @classmethod
    def validate_non_negative_ms(cls, v: int) -> int:
        if v < 0:
            raise ValueError("timeouts and delays must be >= 0")
        return v

    @field_validator("retry_max_attempts")
    @classmethod
    def validate_retry_max_attempts(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("retry_max_attempts must be positive")
        return v

    @field_validator("extraction_mode")
    @classmethod
    def validate_extraction_mode(cls, v: str) -> str:
        mode = v.strip().lower()
        if mode not in ("dom", "html"):
            raise ValueError("extraction_mode must be 'dom' or 'html'")
        return mode

    @field_validator("snapshot_path")
    @classmethod
    def validate_snapshot_path(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("snapshot_path must not be empty")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
