"""Pydantic 스키마 정의 (요청 검증 + 응답 직렬화)"""
from datetime import datetime, timezone
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResultRecord(BaseModel):
    """추출된 검색 결과 한 건

    누락된 필드는 빈 문자열로 채워 스키마를 고정합니다.
    authors/journal 은 문헌(pubmed) 결과에만 존재합니다.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    source_type: str = Field(..., alias="sourceType", description="결과를 만든 엔진 (google, duckduckgo, youtube, pubmed)")
    title: str = Field("", description="제목")
    url: str = Field("", description="절대 URL (링크를 못 찾으면 빈 문자열)")
    snippet: str = Field("", description="요약/설명")
    authors: Optional[str] = Field(None, description="저자 (문헌 결과만)")
    journal: Optional[str] = Field(None, description="저널 (문헌 결과만)")
    captured_at: datetime = Field(..., alias="capturedAt", description="store에 추가된 시각 (UTC)")

    @classmethod
    def from_row(
        cls,
        source_type: str,
        row: dict[str, Any],
        *,
        extra_fields: tuple[str, ...] = (),
        captured_at: Optional[datetime] = None,
    ) -> "ResultRecord":
        """추출기 raw row → ResultRecord

        Args:
            source_type: 엔진 이름
            row: 필드명 → 값 (누락/None 허용)
            extra_fields: 이 엔진에만 있는 추가 필드 (authors, journal 등)
            captured_at: 기록 시각 (없으면 지금)
        """
        def _text(name: str) -> str:
            value = row.get(name)
            return value if isinstance(value, str) else ""

        data: dict[str, Any] = {
            "source_type": source_type,
            "title": _text("title"),
            "url": _text("url"),
            "snippet": _text("snippet"),
            "captured_at": captured_at or datetime.now(timezone.utc),
        }
        for name in extra_fields:
            data[name] = _text(name)
        return cls(**data)

    def to_payload(self) -> dict[str, Any]:
        """JSON 직렬화용 dict (camelCase, 문헌 전용 필드는 있을 때만)"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SearchRequest(BaseModel):
    """POST /search 요청

    필수 여부는 라우트에서 검사합니다 (누락 시 400 + 고정 메시지).
    """
    query: Optional[str] = Field(None, max_length=2048, description="검색어")
    engine: Optional[str] = Field(None, max_length=50, description="google | duckduckgo | youtube | pubmed")


class SearchSnapshot(BaseModel):
    """ResultStore 스냅샷 (= POST /search 성공 응답)"""
    id: str = Field(..., description="스냅샷마다 새로 생성되는 UUID")
    query: str
    engine: str
    results: List[ResultRecord] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """에러 응답"""
    error: str
    message: Optional[str] = None


class ToolCallRequest(BaseModel):
    """도구 호출 요청 {name, arguments}"""
    name: str = Field(..., min_length=1, max_length=100)
    arguments: dict[str, Any] = Field(default_factory=dict)


class SearchToolArguments(BaseModel):
    """search_* 도구 인자"""
    query: str

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        if len(v) > 2048:
            raise ValueError("query must be at most 2048 characters")
        return v


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """도구 호출 결과 (오류는 isError 플래그로 표시)"""
    model_config = ConfigDict(populate_by_name=True)

    content: List[TextContent]
    is_error: Optional[bool] = Field(None, alias="isError")

    @classmethod
    def text(cls, text: str, is_error: bool = False) -> "ToolResult":
        return cls(content=[TextContent(text=text)], is_error=True if is_error else None)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ToolDefinition(BaseModel):
    """도구 목록 항목"""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(..., alias="inputSchema")


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    browser: str
