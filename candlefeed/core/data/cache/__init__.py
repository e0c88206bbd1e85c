"""缓存系统实现模块."""

from candlefeed.core.data.cache.key import CacheKey
from candlefeed.core.data.cache.memory import FifoCache

__all__ = ["CacheKey", "FifoCache"]
