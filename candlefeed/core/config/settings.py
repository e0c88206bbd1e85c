"""配置管理模块 - 处理candlefeed服务的配置"""

import os
import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from collections.abc import Callable, Mapping
from typing import Any

from candlefeed.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".candlefeed" / "config.toml"

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


@dataclass
class CacheConfig:
    """缓存配置"""

    enabled: bool = True
    max_size: int = 100
    # 为true时不缓存仍在进行中的周/月K线结果
    skip_open_periods: bool = False


@dataclass
class ProviderConfig:
    """行情提供商配置"""

    base_url: str = "https://query1.finance.yahoo.com"
    timeout: float = 30.0
    user_agent: str = BROWSER_USER_AGENT
    exchange_suffix: str = ".NS"


@dataclass
class LoggingConfig:
    """日志配置"""

    level: str = "INFO"
    file: str | None = None


@dataclass
class CandleFeedConfig:
    """candlefeed主配置"""

    cache: CacheConfig = field(default_factory=CacheConfig)
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "CandleFeedConfig":
        """从字典创建配置"""
        return cls(
            cache=CacheConfig(**config_dict.get("cache", {})),
            provider=ProviderConfig(**config_dict.get("provider", {})),
            logging=LoggingConfig(**config_dict.get("logging", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """转换为字典"""
        return {
            "cache": asdict(self.cache),
            "provider": asdict(self.provider),
            "logging": asdict(self.logging),
        }


class ConfigManager:
    """配置管理器"""

    def __init__(self, config_path: Path | None = None, environ: Mapping[str, str] | None = None):
        """初始化配置管理器

        Args:
            config_path: 配置文件路径，如果为None则使用默认路径
            environ: 环境变量映射，默认使用 ``os.environ``
        """
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self.environ = os.environ if environ is None else environ
        self.config = self._load_config()

    def _load_config(self) -> CandleFeedConfig:
        """加载配置文件并叠加环境变量"""
        config_dict: dict[str, Any] = {}
        if self.config_path.exists():
            try:
                with open(self.config_path, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.warning(f"Failed to load config from {self.config_path}: {e}")
                config_dict = {}

        deep_update(config_dict, load_config_from_env(self.environ))
        try:
            return CandleFeedConfig.from_dict(config_dict)
        except TypeError as e:
            logger.warning(f"Ignoring invalid config in {self.config_path}: {e}")
            return CandleFeedConfig()

    def get_config(self) -> CandleFeedConfig:
        """获取当前配置"""
        return self.config


def deep_update(d: dict[str, Any], u: dict[str, Any]) -> dict[str, Any]:
    """深度更新字典"""
    for k, v in u.items():
        if isinstance(v, dict):
            d[k] = deep_update(d.get(k, {}), v)
        else:
            d[k] = v
    return d


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_number(name: str, value: str, cast: Callable[[str], Any]) -> Any | None:
    """解析数值型环境变量, 格式错误时记录警告并返回None"""
    try:
        return cast(value)
    except ValueError:
        logger.warning(f"Ignoring malformed {name}={value!r}, keeping default")
        return None


def load_config_from_env(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """从环境变量加载配置"""
    env = os.environ if environ is None else environ
    config: dict[str, Any] = {}

    # 缓存配置
    cache_config: dict[str, Any] = {}
    cache_enabled = env.get("CANDLEFEED_CACHE_ENABLED")
    if cache_enabled is not None:
        cache_config["enabled"] = _as_bool(cache_enabled)
    cache_max_size = env.get("CANDLEFEED_CACHE_MAX_SIZE")
    if cache_max_size is not None:
        max_size = _as_number("CANDLEFEED_CACHE_MAX_SIZE", cache_max_size, int)
        if max_size is not None:
            cache_config["max_size"] = max_size
    cache_skip_open = env.get("CANDLEFEED_CACHE_SKIP_OPEN_PERIODS")
    if cache_skip_open is not None:
        cache_config["skip_open_periods"] = _as_bool(cache_skip_open)

    if cache_config:
        config["cache"] = cache_config

    # 提供商配置
    provider_config: dict[str, Any] = {}
    if env.get("CANDLEFEED_PROVIDER_BASE_URL"):
        provider_config["base_url"] = env["CANDLEFEED_PROVIDER_BASE_URL"]
    provider_timeout = env.get("CANDLEFEED_PROVIDER_TIMEOUT")
    if provider_timeout is not None:
        timeout = _as_number("CANDLEFEED_PROVIDER_TIMEOUT", provider_timeout, float)
        if timeout is not None:
            provider_config["timeout"] = timeout
    exchange_suffix = env.get("CANDLEFEED_EXCHANGE_SUFFIX")
    if exchange_suffix is not None:
        provider_config["exchange_suffix"] = exchange_suffix

    if provider_config:
        config["provider"] = provider_config

    # 日志配置
    logging_config: dict[str, Any] = {}
    logging_level = env.get("CANDLEFEED_LOGGING_LEVEL")
    if logging_level is not None:
        logging_config["level"] = logging_level
    logging_file = env.get("CANDLEFEED_LOGGING_FILE")
    if logging_file is not None:
        logging_config["file"] = logging_file

    if logging_config:
        config["logging"] = logging_config

    return config
