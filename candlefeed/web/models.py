"""Web response models."""

from pydantic import BaseModel, ConfigDict


class CandleOut(BaseModel):
    """Candle as returned to chart clients."""

    time: str
    open: float
    high: float
    low: float
    close: float
    volume: int


class ErrorOut(BaseModel):
    """Error body; ``error`` carries the upstream cause on 500s."""

    model_config = ConfigDict(extra="allow")

    details: str
    code: str
    error: str | None = None
