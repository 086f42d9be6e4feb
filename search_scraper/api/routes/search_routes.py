"""Search Routes - HTTP 검색 엔드포인트

HTTP Layer 는 요청 검증과 응답 변환만 하고 검색은 SearchService 에 위임합니다.
"""

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import JSONResponse

from search_scraper.api.dependencies import get_search_service, get_snapshot_service
from search_scraper.core.exceptions import ScraperException, UnknownEngineException, ValidationException
from search_scraper.core.logging import logger, sanitize_for_log
from search_scraper.crawlers.profiles import is_registered
from search_scraper.schemas.search_schema import ErrorResponse, SearchRequest, SearchSnapshot
from search_scraper.services import SearchService, SnapshotService

router = APIRouter(tags=["search"])

MISSING_FIELDS_ERROR = "Query and engine are required"
INVALID_ENGINE_ERROR = "Invalid search engine"
SEARCH_FAILED_ERROR = "Search failed"


def _require_fields(request: SearchRequest) -> None:
    for field in ("query", "engine"):
        if not getattr(request, field):
            raise ValidationException(field, "required")


def _error(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post(
    "/search",
    response_model=SearchSnapshot,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search(
    request: SearchRequest,
    background_tasks: BackgroundTasks,
    service: SearchService = Depends(get_search_service),
    snapshots: SnapshotService = Depends(get_snapshot_service),
):
    """검색 API

    Flow:
        1. query/engine 검증 (누락 또는 미등록 엔진이면 400)
        2. store 초기화 후 파이프라인 실행
        3. 스냅샷을 파일로 저장 (백그라운드, 실패는 로그만)
        4. 스냅샷 반환
    """
    try:
        _require_fields(request)
    except ValidationException as e:
        logger.warning(f"[API] {e.message}")
        return _error(400, MISSING_FIELDS_ERROR)

    if not is_registered(request.engine, service.profiles):
        logger.warning(f"[API] Invalid search engine: {sanitize_for_log(request.engine)}")
        return _error(400, INVALID_ENGINE_ERROR)

    logger.info(f"[API] Search request: engine={request.engine}, query length={len(request.query)}")

    try:
        snapshot = await service.search(request.query, request.engine)
    except UnknownEngineException:
        return _error(400, INVALID_ENGINE_ERROR)
    except ScraperException as e:
        logger.error(f"[API] Search failed: {e}", exc_info=True)
        return _error(500, SEARCH_FAILED_ERROR, e.message)
    except Exception as e:
        logger.error(f"[API] Search failed: engine={request.engine}", exc_info=True)
        return _error(500, SEARCH_FAILED_ERROR, str(e) or type(e).__name__)

    background_tasks.add_task(snapshots.save_quietly, snapshot)

    return snapshot
