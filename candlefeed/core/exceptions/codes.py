"""Error codes."""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable codes attached to every :class:`CandleFeedError`."""

    GENERAL_ERROR = "GENERAL_ERROR"
    MISSING_PARAMETER = "MISSING_PARAMETER"
    UPSTREAM_NOT_FOUND = "UPSTREAM_NOT_FOUND"
    UPSTREAM_MALFORMED = "UPSTREAM_MALFORMED"
    UPSTREAM_RATE_LIMITED = "UPSTREAM_RATE_LIMITED"
    UPSTREAM_FAILURE = "UPSTREAM_FAILURE"
