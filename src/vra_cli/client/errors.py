"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class VraCLIError(Exception):
    """Base exception for vra-cli."""

    exit_code: int = 1


class VraConnectionError(VraCLIError):
    """Cannot connect to the vRA appliance."""

    exit_code = 2


class AuthenticationError(VraCLIError):
    """Authentication failed (401/403) or no bearer token could be issued."""

    exit_code = 3


class NotFoundError(VraCLIError):
    """Item not found (404), or the requested action is not available."""

    exit_code = 4


class ConflictError(VraCLIError):
    """Conflict (409)."""

    exit_code = 5


class ConfigurationError(VraCLIError):
    """Missing or invalid connection settings."""

    exit_code = 6


class ValidationError(VraCLIError):
    """The server rejected the request payload (400/422)."""

    exit_code = 7

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or "Validation error")


class VraAPIError(VraCLIError):
    """Generic API error from vRA."""

    def __init__(self, status_code: int, detail: str = "") -> None:
        self.status_code = status_code
        super().__init__(f"vRA returned {status_code}: {detail}")


def error_handler(func: F) -> F:
    """Decorator that catches VraCLIError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except VraCLIError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
