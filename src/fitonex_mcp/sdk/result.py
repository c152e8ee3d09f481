"""
Outcome of a FitONEX operation: either a typed value or a described failure.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from fitonex_mcp.sdk.errors import ApiHTTPError, FitonexApiError

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a Resource Client call."""
    success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def ok(cls, value: T = None) -> "Outcome[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, error_code: str = None, status_code: int = None) -> "Outcome[T]":
        return cls(success=False, error=error, error_code=error_code, status_code=status_code)

    @classmethod
    def from_error(cls, action: str, error: Exception) -> "Outcome[T]":
        """Build a failure from an SDK exception, prefixing the failed action."""
        if isinstance(error, ApiHTTPError):
            return cls.fail(
                f"{action} failed: {error.message}",
                error_code=error.code or error.error_code,
                status_code=error.status_code,
            )
        if isinstance(error, FitonexApiError):
            return cls.fail(f"{action} failed: {error}", error_code=error.error_code)
        if isinstance(error, ValueError):
            return cls.fail(f"{action} failed: {error}", error_code="INVALID_INPUT")
        return cls.fail(f"{action} failed: unexpected error: {error}", error_code="UNEXPECTED_ERROR")

    def unwrap(self) -> T:
        """Return the value, or raise RuntimeError with the failure message."""
        if not self.success:
            raise RuntimeError(self.error)
        return self.value

    def to_dict(self) -> dict:
        """Convert to dictionary, excluding None values."""
        if self.success:
            value = self.value
            if hasattr(value, "to_dict"):
                value = value.to_dict()
            elif isinstance(value, (list, tuple)):
                value = [v.to_dict() if hasattr(v, "to_dict") else v for v in value]
            return {"success": True, "data": value}

        result = {"success": False, "error": self.error}
        if self.error_code:
            result["error_code"] = self.error_code
        if self.status_code:
            result["status_code"] = self.status_code
        return result
