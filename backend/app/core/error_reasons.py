"""
error_reasons.py
- Purpose: Human-friendly "reason" strings.
- Keep these stable; API clients may match on them.
"""

from enum import Enum


class ErrorReason(str, Enum):
    INVALID_INPUT = "Invalid input"
    VALIDATION_FAILED = "One or more validation errors occurred"
    RESOURCE_NOT_FOUND = "Resource not found"
    COMPANY_NOT_FOUND = "Company not found"
    EMPLOYEE_NOT_FOUND = "Employee not found"
    INVALID_GENDER = "Invalid gender"
    INVALID_ID = "Invalid identifier"

    STORE_FAILURE = "Store failure"
    INTERNAL_ERROR = "Internal server error"
