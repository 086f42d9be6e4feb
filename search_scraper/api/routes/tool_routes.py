"""Tool Routes - 도구 호출 인터페이스

{name, arguments} 요청을 search_* 도구로 분기합니다.
실패는 HTTP 에러가 아니라 isError 가 설정된 결과로 돌려줍니다.
"""

from fastapi import APIRouter, Depends

from search_scraper.api.dependencies import get_search_service
from search_scraper.schemas.search_schema import ToolCallRequest, ToolDefinition, ToolResult
from search_scraper.services import SearchService

router = APIRouter(prefix="/tools", tags=["tools"])


@router.get("", response_model=list[ToolDefinition])
async def list_tools(service: SearchService = Depends(get_search_service)):
    """사용 가능한 도구 목록"""
    return service.list_tools()


@router.post("/call", response_model=ToolResult, response_model_exclude_none=True)
async def call_tool(
    request: ToolCallRequest,
    service: SearchService = Depends(get_search_service),
):
    return await service.call_tool(request)
