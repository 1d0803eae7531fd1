"""Typed errors raised by the nutrition API client."""

from enum import Enum


class ErrorKind(Enum):
    """Failure categories callers can branch on."""

    CONFIGURATION = "configuration"
    UPSTREAM = "upstream"
    TIMEOUT = "timeout"
    UNEXPECTED = "unexpected"


class NutritionApiError(Exception):
    """Base error carrying a message and an optional HTTP status code."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigurationError(NutritionApiError):
    """Missing credential or empty query, raised before any request."""

    kind = ErrorKind.CONFIGURATION


class UpstreamError(NutritionApiError):
    """Error reported by the remote service."""

    kind = ErrorKind.UPSTREAM


class RequestTimeoutError(NutritionApiError):
    """No response arrived within the request deadline."""

    kind = ErrorKind.TIMEOUT


class UnexpectedError(NutritionApiError):
    """Transport or decoding failure not covered by the other kinds."""

    kind = ErrorKind.UNEXPECTED
