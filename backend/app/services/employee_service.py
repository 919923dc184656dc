# app/services/employee_service.py
"""
employee_service.py
- Purpose: Employee use-cases scoped to one company.
- Owns: company existence check (404), validation, DTO mapping, one save() per call.
- PUT and PATCH upsert: a missing employee is created with the id from the URL.
"""

import logging
from uuid import UUID

from sqlalchemy.orm import Session

from app.core import ErrorReason
from app.core.errors import not_found
from app.core.request_context import set_context
from app.models.employee import Employee
from app.repos.company.read import CompanyReadRepo
from app.repos.employee.read import EmployeeReadRepo
from app.repos.employee.write import EmployeeWriteRepo
from app.schemas.employee import (
    EmployeeAddDto,
    EmployeeDto,
    EmployeePatchDto,
    EmployeeUpdateDto,
)
from app.services.mapping import apply_employee_dto, employee_from_dto
from app.validations.employee_validators import validate_employee_payload, validate_employee_rules

logger = logging.getLogger("app.employee_service")


class EmployeeService:
    def __init__(self, db: Session):
        self.db = db

        self.company_read = CompanyReadRepo(db)
        self.employee_read = EmployeeReadRepo(db)
        self.employee_write = EmployeeWriteRepo(db)

    def _require_company(self, company_id: UUID) -> None:
        if not self.company_read.exists(company_id):
            raise not_found(ErrorReason.COMPANY_NOT_FOUND, details={"company_id": str(company_id)})
        set_context(company_id=str(company_id))

    def _require_employee(self, company_id: UUID, employee_id: UUID) -> Employee:
        employee = self.employee_read.get_for_company(company_id, employee_id)
        if not employee:
            raise not_found(ErrorReason.EMPLOYEE_NOT_FOUND, details={"employee_id": str(employee_id)})
        return employee

    def list_employees(
        self,
        company_id: UUID,
        gender_display: str | None = None,
        q: str | None = None,
    ) -> list[EmployeeDto]:
        self._require_company(company_id)
        employees = self.employee_read.list_for_company(company_id, gender_display, q)
        return [EmployeeDto.from_employee(e) for e in employees]

    def get_employee(self, company_id: UUID, employee_id: UUID) -> EmployeeDto:
        self._require_company(company_id)
        return EmployeeDto.from_employee(self._require_employee(company_id, employee_id))

    def create_employee(self, company_id: UUID, dto: EmployeeAddDto) -> EmployeeDto:
        self._require_company(company_id)
        validate_employee_rules(dto)

        employee = self.employee_write.add_employee(company_id, employee_from_dto(dto))
        self.employee_write.save()

        logger.info("employee.created", extra={"employee_id": str(employee.id)})
        return EmployeeDto.from_employee(employee)

    def update_employee(
        self, company_id: UUID, employee_id: UUID, dto: EmployeeUpdateDto
    ) -> tuple[EmployeeDto, bool]:
        """Full replace. Returns (employee, created)."""
        self._require_company(company_id)
        validate_employee_rules(dto)

        employee = self.employee_read.get_for_company(company_id, employee_id)
        if employee is None:
            return self._create_with_id(company_id, employee_id, dto), True

        apply_employee_dto(dto, employee)
        self.employee_write.update_employee(employee)
        self.employee_write.save()

        logger.info("employee.updated", extra={"employee_id": str(employee_id)})
        return EmployeeDto.from_employee(employee), False

    def patch_employee(
        self, company_id: UUID, employee_id: UUID, patch: EmployeePatchDto
    ) -> tuple[EmployeeDto, bool]:
        """
        Partial update: only fields present in the body are applied, then the
        merged employee must pass full validation. Returns (employee, created).
        """
        self._require_company(company_id)
        changes = patch.model_dump(exclude_unset=True)

        employee = self.employee_read.get_for_company(company_id, employee_id)
        if employee is None:
            # Patch applied to an empty employee: required fields must all be in the body
            dto = validate_employee_payload(changes)
            return self._create_with_id(company_id, employee_id, dto), True

        current = {name: getattr(employee, name) for name in EmployeeUpdateDto.model_fields}
        current.update(changes)
        dto = validate_employee_payload(current)

        apply_employee_dto(dto, employee)
        self.employee_write.update_employee(employee)
        self.employee_write.save()

        logger.info("employee.patched", extra={"employee_id": str(employee_id), "fields": sorted(changes)})
        return EmployeeDto.from_employee(employee), False

    def delete_employee(self, company_id: UUID, employee_id: UUID) -> None:
        self._require_company(company_id)
        employee = self._require_employee(company_id, employee_id)

        self.employee_write.delete_employee(employee)
        self.employee_write.save()

        logger.info("employee.deleted", extra={"employee_id": str(employee_id)})

    def _create_with_id(self, company_id: UUID, employee_id: UUID, dto: EmployeeUpdateDto) -> EmployeeDto:
        employee = employee_from_dto(dto)
        employee.id = employee_id
        self.employee_write.add_employee(company_id, employee)
        self.employee_write.save()

        logger.info("employee.upserted", extra={"employee_id": str(employee_id)})
        return EmployeeDto.from_employee(employee)
