"""Error types raised by compose backends and helpers to classify them."""

from __future__ import annotations

EXIT_CODE_LOGIN_REQUIRED = 5
"""Exit code used when a command cannot run until the user logs in."""


class ApiError(Exception):
    """Base class for errors reported by a compose backend.

    An optional context message is placed in front of the kind's own
    message, as in ``'object "name": not found'``.
    """

    default_message = "api error"

    def __init__(self, message: str | None = None) -> None:
        self.context = message
        if message:
            text = f"{message}: {self.default_message}"
        else:
            text = self.default_message
        super().__init__(text)


class NotFoundError(ApiError):
    """An object was not found."""

    default_message = "not found"


class AlreadyExistsError(ApiError):
    """An object already exists."""

    default_message = "already exists"


class ForbiddenError(ApiError):
    """An operation is not permitted."""

    default_message = "forbidden"


class UnknownError(ApiError):
    """The error kind is not mapped."""

    default_message = "unknown"


class LoginFailedError(ApiError):
    """Login failed."""

    default_message = "login failed"


class LoginRequiredError(ApiError):
    """Login is required for the requested action."""

    default_message = "login required"


class NotImplementedApiError(ApiError):
    """A backend does not implement the requested action."""

    default_message = "not implemented"


class UnsupportedFlagError(ApiError):
    """A backend does not support a flag."""

    default_message = "unsupported flag"


class CanceledError(ApiError):
    """The command was canceled by the user."""

    default_message = "canceled"


class ParsingFailedError(ApiError):
    """A string could not be parsed."""

    default_message = "parsing failed"


class WrongContextTypeError(ApiError):
    """A context of the wrong type was requested."""

    default_message = "wrong context type"


def _chain(err: BaseException | None):
    """Yield an error and every error it was raised from."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = err.__cause__


def _is(err: BaseException | None, kind: type[ApiError]) -> bool:
    return any(isinstance(e, kind) for e in _chain(err))


def is_not_found_error(err: BaseException | None) -> bool:
    """Return True if the error, or one it wraps, is a NotFoundError."""
    return _is(err, NotFoundError)


def is_already_exists_error(err: BaseException | None) -> bool:
    """Return True if the error, or one it wraps, is an AlreadyExistsError."""
    return _is(err, AlreadyExistsError)


def is_forbidden_error(err: BaseException | None) -> bool:
    """Return True if the error, or one it wraps, is a ForbiddenError."""
    return _is(err, ForbiddenError)


def is_unknown_error(err: BaseException | None) -> bool:
    """Return True if the error, or one it wraps, is an UnknownError."""
    return _is(err, UnknownError)


def is_unsupported_flag(err: BaseException | None) -> bool:
    """Return True if the error, or one it wraps, is an UnsupportedFlagError."""
    return _is(err, UnsupportedFlagError)


def is_not_implemented(err: BaseException | None) -> bool:
    """Return True if the error, or one it wraps, is a NotImplementedApiError."""
    return _is(err, NotImplementedApiError)


def is_parsing_failed(err: BaseException | None) -> bool:
    """Return True if the error, or one it wraps, is a ParsingFailedError."""
    return _is(err, ParsingFailedError)


def is_canceled(err: BaseException | None) -> bool:
    """Return True if the error, or one it wraps, is a CanceledError."""
    return _is(err, CanceledError)