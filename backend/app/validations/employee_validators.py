"""
employee_validators.py
- Purpose: Validations specific to employee inputs.
- Design: Normalize + validate at the boundary, keep services clean.
"""

from typing import Any

from pydantic import ValidationError

from app.constants.gender import Gender
from app.core import ErrorReason
from app.core.errors import invalid_argument, validation_failed
from app.schemas.employee import EmployeeAddOrUpdateDto, EmployeeUpdateDto
from app.validations.field_errors import field_errors_from


def parse_gender(label: str | None) -> Gender | None:
    """
    Blank -> None (no filter). Otherwise the trimmed label must match a Gender
    value exactly ("Male", "Female"); "male" is rejected.
    """
    if label is None or not label.strip():
        return None
    label = label.strip()
    try:
        return Gender(label)
    except ValueError:
        raise invalid_argument(
            ErrorReason.INVALID_GENDER,
            message=f"'{label}' is not a valid gender",
            details={"allowed": [g.value for g in Gender]},
        ) from None


def employee_rule_errors(dto: EmployeeAddOrUpdateDto, prefix: str = "") -> list[dict[str, str]]:
    """
    Cross-field rules the field constraints cannot express.
    prefix locates a nested employee in the request body, e.g. "employees.0".
    """
    at = f"{prefix}." if prefix else ""
    errors: list[dict[str, str]] = []

    if dto.employee_no == dto.first_name:
        errors.append({"field": f"{at}employee_no", "message": "Employee Number cannot be the same as First Name."})

    if dto.first_name == dto.last_name:
        msg = "First Name and Last Name cannot be the same"
        errors.append({"field": f"{at}first_name", "message": msg})
        errors.append({"field": f"{at}last_name", "message": msg})

    return errors


def validate_employee_rules(dto: EmployeeAddOrUpdateDto) -> None:
    errors = employee_rule_errors(dto)
    if errors:
        raise validation_failed(errors)


def validate_employee_payload(data: dict[str, Any]) -> EmployeeUpdateDto:
    """Validate a merged (patched) payload as a full update DTO."""
    try:
        dto = EmployeeUpdateDto.model_validate(data)
    except ValidationError as e:
        raise validation_failed(field_errors_from(e.errors())) from None
    validate_employee_rules(dto)
    return dto
