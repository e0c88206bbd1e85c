"""
K线数据 API 路由
"""

from fastapi import APIRouter, Query, Request

from candlefeed.core.models.interval import DEFAULT_INTERVAL, DEFAULT_RANGE
from candlefeed.core.services import CandleService
from candlefeed.web.models import CandleOut, ErrorOut

router = APIRouter()


@router.get(
    "/stock",
    response_model=list[CandleOut],
    responses={status: {"model": ErrorOut} for status in (400, 404, 429, 500)},
)
async def get_stock_candles(
    request: Request,
    symbol: str | None = Query(None, description="NSE 股票代码，如 RELIANCE"),
    range: str = Query(DEFAULT_RANGE, description="时间范围 (1y, 2y, 5y, max ...)"),
    interval: str = Query(DEFAULT_INTERVAL, description="K线周期 (1d, 1wk, 1mo)"),
) -> list[CandleOut]:
    """
    获取单只股票的K线数据

    - **symbol**: 股票代码，自动追加交易所后缀
    - **range**: 原样转发给行情源
    - **interval**: 1wk/1mo 会对齐到周一/月初并补齐当前周期
    """
    service: CandleService = request.app.state.candle_service
    candles = await service.get_candles(symbol, range, interval)
    return [CandleOut.model_validate(candle.model_dump()) for candle in candles]
