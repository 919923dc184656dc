"""
employee.py (schemas)
- Purpose: Request/response DTOs for employees.
- Design: Add/Update share one shape; Patch makes every field optional.
"""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.constants.gender import Gender


class EmployeeAddOrUpdateDto(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    employee_no: str = Field(min_length=10, max_length=10)
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    gender: Gender
    date_of_birth: date


class EmployeeAddDto(EmployeeAddOrUpdateDto):
    pass


class EmployeeUpdateDto(EmployeeAddOrUpdateDto):
    pass


class EmployeePatchDto(BaseModel):
    """
    Partial update. Only fields present in the request body are applied
    (model_dump(exclude_unset=True)); the merged result is validated as EmployeeUpdateDto.
    """

    employee_no: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    gender: Gender | None = None
    date_of_birth: date | None = None


class EmployeeDto(BaseModel):
    id: UUID
    company_id: UUID
    employee_no: str
    name: str
    gender_display: str
    age: int

    @classmethod
    def from_employee(cls, employee, *, today: date | None = None) -> "EmployeeDto":
        today = today or date.today()
        return cls(
            id=employee.id,
            company_id=employee.company_id,
            employee_no=employee.employee_no,
            name=f"{employee.first_name}{employee.last_name}",
            gender_display=employee.gender.value if hasattr(employee.gender, "value") else str(employee.gender),
            age=today.year - employee.date_of_birth.year,
        )
