"""
FastAPI 应用工厂和配置
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from candlefeed.core.config import CandleFeedConfig, ConfigManager
from candlefeed.core.exceptions import CandleFeedError, ErrorMessages
from candlefeed.core.logging import configure_logging, get_logger
from candlefeed.core.services import CandleService
from candlefeed.web.routes import health_router, stock_router

logger = get_logger(__name__)


def create_app(service: CandleService | None = None, config: CandleFeedConfig | None = None) -> FastAPI:
    """创建 FastAPI 应用实例

    Args:
        service: 预先构建的服务实例；为None时在启动阶段按配置创建
        config: 服务配置；为None时从配置文件和环境变量加载
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """应用生命周期管理"""
        resolved_config = config or ConfigManager().get_config()
        configure_logging(
            level=resolved_config.logging.level,
            file_output=resolved_config.logging.file is not None,
            file_path=resolved_config.logging.file,
        )
        owned = service is None
        app.state.candle_service = service or CandleService.from_config(resolved_config)
        app.state.config = resolved_config
        logger.info("candlefeed web service started")

        yield

        if owned:
            await app.state.candle_service.aclose()

    app = FastAPI(
        title="candlefeed",
        description="Period-aligned OHLCV candles for charting",
        version="0.1.0",
        lifespan=lifespan,
    )

    _setup_middleware(app)
    _setup_routes(app)
    _setup_exception_handlers(app)

    return app


def _setup_middleware(app: FastAPI) -> None:
    """配置中间件"""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)


def _setup_routes(app: FastAPI) -> None:
    """注册路由"""
    app.include_router(stock_router, prefix="/api", tags=["stock"])
    app.include_router(health_router, prefix="/api", tags=["health"])


def _setup_exception_handlers(app: FastAPI) -> None:
    """配置异常处理器"""

    @app.exception_handler(CandleFeedError)
    async def candlefeed_exception_handler(request: Request, exc: CandleFeedError) -> JSONResponse:
        """处理 candlefeed 自定义异常"""
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """处理未捕获的异常"""
        logger.opt(exception=exc).error(f"Unhandled error on {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"details": ErrorMessages.FETCH_FAILED, "error": str(exc)},
        )
