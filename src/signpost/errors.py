"""Signpost exception hierarchy.

Shared across the pattern compiler, Router, and the ASGI boundary so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class SignpostError(Exception):
    """Base for all signpost-specific errors."""


class ConfigurationError(SignpostError):
    """Raised when a route registration is invalid.

    Always raised synchronously from ``Router.add_route()``; never
    deferred to dispatch time.
    """


class InvalidPattern(ConfigurationError):  # noqa: N818
    """A route path template could not be compiled.

    Raised for empty or duplicated placeholder names and for unbalanced
    ``{`` / ``}`` delimiters.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid route pattern {path!r}: {reason}")


class InvalidHandlerReference(ConfigurationError):  # noqa: N818
    """A string handler reference (``"module:Class::method"``) did not resolve."""

    def __init__(self, reference: str, reason: str) -> None:
        self.reference = reference
        self.reason = reason
        super().__init__(f"Cannot resolve handler {reference!r}: {reason}")


@dataclass(frozen=True, slots=True)
class HTTPError(SignpostError):
    """An error that maps directly to an HTTP status code.

    The ASGI boundary catches these and turns them into responses.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: no route matched and no not-found handler is registered."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
