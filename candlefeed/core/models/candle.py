"""Candle and raw quote models."""

from typing import Any

from pydantic import BaseModel, Field, model_validator


class Candle(BaseModel):
    """One chart bar anchored to a calendar date (``YYYY-MM-DD``)."""

    time: str
    open: float
    high: float
    low: float
    close: float
    volume: int = Field(ge=0)

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump()


class RawQuoteBlock(BaseModel):
    """Parallel OHLCV arrays as delivered by the quote provider.

    Every array is index-aligned with ``timestamp`` (Unix seconds). Entries may
    be ``None`` where the provider has no value.
    """

    timestamp: list[int]
    open: list[float | None] = Field(default_factory=list)
    high: list[float | None] = Field(default_factory=list)
    low: list[float | None] = Field(default_factory=list)
    close: list[float | None] = Field(default_factory=list)
    volume: list[float | None] = Field(default_factory=list)
    adjclose: list[float | None] | None = None

    @model_validator(mode="after")
    def _align_arrays(self) -> "RawQuoteBlock":
        """Pad or cut every series to ``len(timestamp)``."""
        size = len(self.timestamp)
        for name in ("open", "high", "low", "close", "volume"):
            setattr(self, name, _fit(getattr(self, name), size))
        if self.adjclose is None:
            self.adjclose = list(self.close)
        else:
            self.adjclose = _fit(self.adjclose, size)
        return self

    def __len__(self) -> int:
        return len(self.timestamp)


def _fit(values: list[float | None], size: int) -> list[float | None]:
    if len(values) >= size:
        return list(values[:size])
    return list(values) + [None] * (size - len(values))
