"""``candles`` command: fetch and print chart candles."""

from __future__ import annotations

import asyncio
import sys

import typer

from candlefeed.core.config import ConfigManager
from candlefeed.core.exceptions import MissingParameterError, UpstreamError
from candlefeed.core.models.candle import Candle
from candlefeed.core.models.interval import CHART_PRESETS, DEFAULT_INTERVAL, DEFAULT_RANGE
from candlefeed.core.services import CandleService

from .constants import PROVIDER_EXIT_CODE, SYSTEM_EXIT_CODE, VALIDATION_EXIT_CODE
from .formatters import create_formatter
from .utils import emit_error

COLUMNS = ["time", "open", "high", "low", "close", "volume"]


def get_candle_service() -> CandleService:
    """Factory hook for obtaining a :class:`CandleService` instance."""

    return CandleService.from_config(ConfigManager().get_config())


def resolve_request(range: str | None, interval: str | None, preset: str | None) -> tuple[str, str]:
    """Pick ``(range, interval)``; explicit options override the preset."""

    if preset is not None:
        key = preset.strip().lower()
        if key not in CHART_PRESETS:
            allowed = ", ".join(CHART_PRESETS)
            raise typer.BadParameter(f"Unsupported preset '{preset}'. Allowed values: {allowed}", param_hint="--preset")
        preset_interval, preset_range = CHART_PRESETS[key]
        return range or preset_range, interval or preset_interval
    return range or DEFAULT_RANGE, interval or DEFAULT_INTERVAL


async def _fetch(service: CandleService, symbol: str, range: str, interval: str) -> list[Candle]:
    try:
        return await service.get_candles(symbol, range, interval)
    finally:
        await service.aclose()


def candles_command(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Ticker without exchange suffix, e.g. RELIANCE."),
    range: str | None = typer.Option(None, "--range", "-r", help="Upstream range (1y, 2y, 5y, max ...)."),
    interval: str | None = typer.Option(None, "--interval", "-i", help="Candle interval (1d, 1wk, 1mo)."),
    preset: str | None = typer.Option(None, "--preset", "-p", help="Chart preset: daily, weekly or monthly."),
) -> None:
    """Fetch candles for SYMBOL and render them."""

    ctx.ensure_object(dict)
    formatter = create_formatter(ctx.obj.get("format", "table"), no_color=ctx.obj.get("no_color", False))
    resolved_range, resolved_interval = resolve_request(range, interval, preset)

    service = get_candle_service()
    try:
        candles = asyncio.run(_fetch(service, symbol, resolved_range, resolved_interval))
    except MissingParameterError as error:
        emit_error(error.message, error.error_code.value, details=error.details)
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from error
    except UpstreamError as error:
        emit_error(error.message, error.error_code.value, details=error.details)
        raise typer.Exit(code=PROVIDER_EXIT_CODE) from error
    except Exception as error:  # pragma: no cover - safety net
        emit_error(str(error), "UNEXPECTED_ERROR")
        raise typer.Exit(code=SYSTEM_EXIT_CODE) from error

    formatter.render([candle.as_dict() for candle in candles], stream=sys.stdout, columns=COLUMNS)
