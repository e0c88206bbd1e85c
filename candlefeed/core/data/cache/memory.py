"""线程安全的FIFO内存缓存实现."""

from collections import OrderedDict
from threading import Lock
from typing import Generic, Iterator, TypeVar

V = TypeVar("V")


class FifoCache(Generic[V]):
    """Bounded in-memory map evicting the oldest inserted entry.

    Eviction follows insertion order, not access order: reading a key never
    extends its life, and overwriting a key keeps its original position.
    There is no TTL; entries live until evicted or cleared.
    """

    def __init__(self, max_size: int = 100):
        """初始化内存缓存."""
        if max_size < 1:
            raise ValueError("max_size must be positive")
        self.max_size = max_size
        self._cache: OrderedDict[str, V] = OrderedDict()
        self._lock = Lock()

    def get(self, key: str) -> V | None:
        """从缓存获取数据, 未命中返回None."""
        with self._lock:
            return self._cache.get(key)

    def set(self, key: str, value: V) -> None:
        """写入缓存, 超出容量时淘汰最早写入的条目."""
        with self._lock:
            self._cache[key] = value
            while len(self._cache) > self.max_size:
                self._cache.popitem(last=False)

    def clear(self) -> None:
        """清空缓存."""
        with self._lock:
            self._cache.clear()

    def keys(self) -> list[str]:
        """Keys from oldest to newest."""
        with self._lock:
            return list(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        """获取缓存大小."""
        with self._lock:
            return len(self._cache)
