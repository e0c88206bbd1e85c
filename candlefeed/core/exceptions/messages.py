"""User-facing error messages."""


class ErrorMessages:
    SYMBOL_REQUIRED = "Symbol is required."
    SYMBOL_NOT_FOUND = "Stock symbol not found"
    NO_DATA = "No data available for this symbol"
    RATE_LIMITED = "Too many requests. Please try again later."
    FETCH_FAILED = "Error fetching stock data"
