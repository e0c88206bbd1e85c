"""缓存键生成."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheKey:
    """Composite ``symbol|range|interval`` key.

    ``symbol`` must already carry its exchange suffix.
    """

    symbol: str
    range: str
    interval: str

    @property
    def key(self) -> str:
        return "|".join((self.symbol, self.range, self.interval))

    def __str__(self) -> str:
        return self.key
