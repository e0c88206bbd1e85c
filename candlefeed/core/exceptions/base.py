"""candlefeed核心异常类."""

from typing import Any

from candlefeed.core.exceptions.codes import ErrorCode
from candlefeed.core.exceptions.messages import ErrorMessages


class CandleFeedError(Exception):
    """candlefeed基础异常类."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.GENERAL_ERROR,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        """初始化异常.

        Args:
            message: 面向调用方的简短错误消息
            error_code: 错误代码
            status_code: HTTP风格状态码
            details: 额外详情
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body sent to callers."""
        payload: dict[str, Any] = {"details": self.message, "code": self.error_code.value}
        payload.update(self.details)
        return payload


class MissingParameterError(CandleFeedError):
    """请求缺少必需参数."""

    status_code = 400

    def __init__(self, parameter: str = "symbol", message: str | None = None):
        super().__init__(
            message or ErrorMessages.SYMBOL_REQUIRED,
            ErrorCode.MISSING_PARAMETER,
            details={"parameter": parameter},
        )
        self.parameter = parameter


class UpstreamError(CandleFeedError):
    """行情提供商相关异常."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        symbol: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, error_code, details=details)
        self.symbol = symbol


class UpstreamNotFoundError(UpstreamError):
    """提供商没有该代码的数据."""

    status_code = 404

    def __init__(self, symbol: str | None = None, message: str = ErrorMessages.SYMBOL_NOT_FOUND):
        super().__init__(message, ErrorCode.UPSTREAM_NOT_FOUND, symbol)


class UpstreamMalformedError(UpstreamError):
    """响应缺少 ``chart.result[0]`` 结构."""

    status_code = 404

    def __init__(self, symbol: str | None = None, message: str = ErrorMessages.NO_DATA):
        super().__init__(message, ErrorCode.UPSTREAM_MALFORMED, symbol)


class UpstreamRateLimitedError(UpstreamError):
    """速率限制异常."""

    status_code = 429

    def __init__(self, symbol: str | None = None, retry_after: int | None = None):
        details = {"retry_after": retry_after} if retry_after is not None else None
        super().__init__(ErrorMessages.RATE_LIMITED, ErrorCode.UPSTREAM_RATE_LIMITED, symbol, details)
        self.retry_after = retry_after


class UnknownUpstreamError(UpstreamError):
    """其他传输或解析错误."""

    status_code = 500

    def __init__(self, cause: str, symbol: str | None = None):
        super().__init__(ErrorMessages.FETCH_FAILED, ErrorCode.UPSTREAM_FAILURE, symbol, {"error": cause})
        self.cause = cause
