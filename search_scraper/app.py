"""FastAPI 앱 팩토리"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from search_scraper.core.config import settings
from search_scraper.core.logging import logger
from search_scraper.api import health_router, search_router, tool_router
from search_scraper.api.dependencies import shutdown_browser_session


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기

    SIGINT/SIGTERM 은 uvicorn 이 lifespan 종료로 바꿔주므로,
    여기서 브라우저를 닫아야 외부 프로세스가 남지 않습니다.
    """
    logger.info("Starting application...")
    yield
    logger.info("Shutting down application...")
    await shutdown_browser_session()
    logger.info("Exiting...")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """잘못된 요청 본문은 422 대신 400 으로 응답"""
    logger.warning(f"[API] Invalid request body for {request.url.path}: {len(exc.errors())} error(s)")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "message": "Request body must be a JSON object"},
    )


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(search_router)
    app.include_router(tool_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
