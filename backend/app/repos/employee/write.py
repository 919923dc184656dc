"""
employee/write.py
- Purpose: Write-side DB operations for Employee.
- Design: No business logic; stage changes, the service decides when to save().
"""

import uuid
from uuid import UUID

from app.core.errors import invalid_argument
from app.models.employee import Employee
from app.repos.base import WriteRepo
from app.validations.id_validators import require_id


class EmployeeWriteRepo(WriteRepo):
    def add_employee(self, company_id: UUID, employee: Employee) -> Employee:
        """Attach to the company and stage. Keeps a caller-supplied id (upsert), else generates one."""
        require_id(company_id, "company_id")
        if employee is None:
            raise invalid_argument(message="employee is required")

        employee.company_id = company_id
        if employee.id is None:
            employee.id = uuid.uuid4()

        self.db.add(employee)
        return employee

    def update_employee(self, employee: Employee) -> Employee:
        if employee is None:
            raise invalid_argument(message="employee is required")
        self.db.add(employee)
        return employee

    def delete_employee(self, employee: Employee) -> None:
        if employee is None:
            raise invalid_argument(message="employee is required")
        self.db.delete(employee)

    def delete_for_company(self, company_id: UUID) -> int:
        require_id(company_id, "company_id")
        employees = self.db.query(Employee).filter(Employee.company_id == company_id).all()
        for employee in employees:
            self.db.delete(employee)
        return len(employees)
