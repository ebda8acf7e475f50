"""Structured results returned across the registry boundary."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "validation_error"
    PARSE_ERROR = "parse_error"
    INDEX_ERROR = "index_error"


@dataclass(frozen=True)
class Response:
    """
    Outcome of a registry operation.

    Exactly one of two shapes:
        - success=True, error=None, data holds the payload.
        - success=False, error is an ErrorCode, detail explains it.
    """

    success: bool
    detail: str | None = None
    error: ErrorCode | None = None
    data: dict[str, Any] | None = None

    @classmethod
    def succeed(cls, detail: str | None = None, data: dict[str, Any] | None = None) -> "Response":
        return cls(success=True, detail=detail, data=data or {})

    @classmethod
    def fail(cls, detail: str, error: ErrorCode) -> "Response":
        return cls(success=False, detail=detail, error=error)

    def __bool__(self) -> bool:
        return self.success
