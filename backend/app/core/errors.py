"""
errors.py
- Purpose: AppError used across services/repos for consistent errors.
- Pattern: raise AppError(...) in service/repo, handler converts to JSON response.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import status as http_status

from app.core.error_codes import ErrorCode
from app.core.error_reasons import ErrorReason


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: dict[str, Any] | None = None
    message: str | None = None  # Optional human-readable message

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": {
                "code": self.code,
                "reason": self.reason,
                "message": self.message if self.message else self.reason,
            }
        }
        if self.details:
            payload["error"]["details"] = self.details
        return payload


def _reason_text(reason: str) -> str:
    # str() of a str-Enum member is "ErrorReason.X", not its value
    return reason.value if isinstance(reason, ErrorReason) else str(reason)


# Convenience constructors (keep services cleaner)
def invalid_argument(reason: str = ErrorReason.INVALID_INPUT, *, message: str | None = None, details: dict | None = None) -> AppError:
    return AppError(
        code=ErrorCode.INVALID_ARGUMENT,
        reason=_reason_text(reason),
        status_code=http_status.HTTP_400_BAD_REQUEST,
        details=details,
        message=message,
    )


def validation_failed(errors: list[dict[str, str]], *, message: str | None = None) -> AppError:
    """errors: [{"field": ..., "message": ...}, ...]"""
    return AppError(
        code=ErrorCode.VALIDATION_FAILED,
        reason=ErrorReason.VALIDATION_FAILED.value,
        status_code=http_status.HTTP_400_BAD_REQUEST,
        details={"errors": errors},
        message=message,
    )


def not_found(reason: str = ErrorReason.RESOURCE_NOT_FOUND, *, message: str | None = None, details: dict | None = None) -> AppError:
    return AppError(
        code=ErrorCode.NOT_FOUND,
        reason=_reason_text(reason),
        status_code=http_status.HTTP_404_NOT_FOUND,
        details=details,
        message=message,
    )
