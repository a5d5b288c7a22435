from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class ExitCode:
    OK = 0
    RUNTIME_ERROR = 1
    INVALID_USAGE = 2
    NOT_FOUND = 3


@dataclass(frozen=True, slots=True)
class NewsqError(Exception):
    code: str
    message: str
    exit_code: int = ExitCode.RUNTIME_ERROR
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return self.message

    def to_error_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidCredential(NewsqError):
    def __init__(self, message: str = "invalid api key") -> None:
        super().__init__(
            code="invalid_credential", message=message, exit_code=ExitCode.INVALID_USAGE
        )


class InvalidEndpoint(NewsqError):
    def __init__(self, name: str) -> None:
        super().__init__(
            code="invalid_endpoint",
            message=f"unknown endpoint: {name}",
            exit_code=ExitCode.INVALID_USAGE,
            details={"endpoint": name},
        )


class MissingQuery(NewsqError):
    def __init__(self, message: str = "query string is required") -> None:
        super().__init__(code="missing_query", message=message, exit_code=ExitCode.INVALID_USAGE)


class InvalidQuery(NewsqError):
    def __init__(self, message: str, *, length: int) -> None:
        super().__init__(
            code="invalid_query",
            message=message,
            exit_code=ExitCode.INVALID_USAGE,
            details={"length": length},
        )


class TransportError(NewsqError):
    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(code="transport_error", message=message, details={"url": url})


class DecodeError(NewsqError):
    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(code="decode_error", message=message, details={"status": status})


class ProviderError(NewsqError):
    """The provider answered with an error envelope (``status == "error"``)."""

    def __init__(self, message: str, *, provider_code: str | None, status: int | None) -> None:
        super().__init__(
            code="provider_error",
            message=message,
            details={"provider_code": provider_code, "status": status},
        )

    @property
    def provider_code(self) -> str | None:
        return (self.details or {}).get("provider_code")
