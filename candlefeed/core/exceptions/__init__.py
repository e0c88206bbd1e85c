"""Exception handling module."""

from candlefeed.core.exceptions.base import (
    CandleFeedError,
    MissingParameterError,
    UnknownUpstreamError,
    UpstreamError,
    UpstreamMalformedError,
    UpstreamNotFoundError,
    UpstreamRateLimitedError,
)
from candlefeed.core.exceptions.codes import ErrorCode
from candlefeed.core.exceptions.messages import ErrorMessages

__all__ = [
    "CandleFeedError",
    "MissingParameterError",
    "UpstreamError",
    "UpstreamNotFoundError",
    "UpstreamMalformedError",
    "UpstreamRateLimitedError",
    "UnknownUpstreamError",
    "ErrorCode",
    "ErrorMessages",
]
