import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from problem_service import __version__
from problem_service.core.config import settings
from problem_service.core.database import create_tables
from problem_service.core.exceptions import AppError
from problem_service.core.logging_config import configure_logging
from problem_service.api.v1.api import api_router

logger = logging.getLogger(__name__)


# アプリケーション初期化
def create_application() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Problem Service API",
        description="問題・トピック管理 API",
        version=__version__,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    # CORS設定
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    # APIルーター追加
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_application()


@app.on_event("startup")
def startup_event():
    """アプリケーション起動時の処理"""
    create_tables()
    logger.info("Problem Service started (environment=%s)", settings.ENVIRONMENT)


@app.get("/")
def root():
    """ヘルスチェック"""
    return {"message": "Problem Service API is running"}


@app.get("/health")
def health_check():
    """ヘルスチェック詳細"""
    return {
        "status": "healthy",
        "version": __version__,
        "environment": settings.ENVIRONMENT
    }
