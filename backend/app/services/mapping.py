"""
mapping.py
- Purpose: DTO -> ORM mapping for writes (ORM -> DTO lives on the response schemas).
"""

from app.models.company import Company
from app.models.employee import Employee
from app.schemas.company import CompanyAddDto
from app.schemas.employee import EmployeeAddOrUpdateDto


def apply_employee_dto(dto: EmployeeAddOrUpdateDto, employee: Employee) -> Employee:
    employee.employee_no = dto.employee_no
    employee.first_name = dto.first_name
    employee.last_name = dto.last_name
    employee.gender = dto.gender.value
    employee.date_of_birth = dto.date_of_birth
    return employee


def employee_from_dto(dto: EmployeeAddOrUpdateDto) -> Employee:
    return apply_employee_dto(dto, Employee())


def company_from_dto(dto: CompanyAddDto) -> Company:
    company = Company(name=dto.name, introduction=dto.introduction)
    company.employees = [employee_from_dto(e) for e in dto.employees]
    return company
