"""Closed error taxonomy for weather fetches and the user-facing messages."""

from __future__ import annotations

from enum import Enum


class ErrorMessages:
    """Fixed English strings shown to the user."""
    INVALID_CITY = "Please enter a valid city name"
    NO_INTERNET = "No internet connection. Please check your network."
    CITY_NOT_FOUND = "City not found. Please check the spelling."
    UNAUTHORIZED = "API key is invalid. Please check your configuration."
    SERVER_ERROR = "Server error (Code: {code}). Please try again later."
    DECODING = "Unable to process server response."
    GENERIC = "Something went wrong. Please try again."


class FetchErrorKind(str, Enum):
    """Every way a fetch can fail."""
    INVALID_INPUT = "invalid_input"
    UNREACHABLE = "unreachable"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    SERVER_ERROR = "server_error"
    DECODING_ERROR = "decoding_error"
    UNKNOWN = "unknown"


class FetchError(Exception):
    """Base class for classified provider failures.

    Subclasses fix `kind` and `message`; callers should never need to look
    at the wrapped transport or parser exception (kept in `__cause__`).
    """
    kind: FetchErrorKind = FetchErrorKind.UNKNOWN
    default_message: str = ErrorMessages.GENERIC

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail

    @property
    def message(self) -> str:
        """User-facing message for this error."""
        return self.default_message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FetchError):
            return NotImplemented
        return self.kind == other.kind and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.kind, self.message))


class InvalidInputError(FetchError):
    kind = FetchErrorKind.INVALID_INPUT
    default_message = ErrorMessages.INVALID_CITY


class UnreachableError(FetchError):
    kind = FetchErrorKind.UNREACHABLE
    default_message = ErrorMessages.NO_INTERNET


class NotFoundError(FetchError):
    kind = FetchErrorKind.NOT_FOUND
    default_message = ErrorMessages.CITY_NOT_FOUND


class UnauthorizedError(FetchError):
    kind = FetchErrorKind.UNAUTHORIZED
    default_message = ErrorMessages.UNAUTHORIZED


class ServerError(FetchError):
    kind = FetchErrorKind.SERVER_ERROR

    def __init__(self, code: int, detail: str | None = None) -> None:
        self.code = int(code)
        super().__init__(detail)

    @property
    def message(self) -> str:
        return ErrorMessages.SERVER_ERROR.format(code=self.code)


class DecodingError(FetchError):
    kind = FetchErrorKind.DECODING_ERROR
    default_message = ErrorMessages.DECODING


class UnknownFetchError(FetchError):
    kind = FetchErrorKind.UNKNOWN
    default_message = ErrorMessages.GENERIC


def error_for_status(status_code: int) -> FetchError | None:
    """Classify an HTTP status code; None means the response is usable."""
    if 200 <= status_code <= 299:
        return None
    if status_code == 401:
        return UnauthorizedError()
    if status_code == 404:
        return NotFoundError()
    return ServerError(status_code)


def message_for_error(error: BaseException) -> str:
    """Map any exception to the message the user should see."""
    if isinstance(error, FetchError):
        return error.message
    return ErrorMessages.GENERIC
