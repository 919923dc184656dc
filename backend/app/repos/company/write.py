"""
company/write.py
- Purpose: Write-side DB operations for Company.
- Design: No business logic. Stage changes only; the service calls save().
"""

import uuid

from sqlalchemy.orm import Session

from app.core.errors import invalid_argument
from app.models.company import Company
from app.repos.base import WriteRepo
from app.repos.employee.write import EmployeeWriteRepo


class CompanyWriteRepo(WriteRepo):
    def __init__(self, db: Session):
        super().__init__(db)
        self.employee_write = EmployeeWriteRepo(db)

    def add_company(self, company: Company) -> Company:
        """Assign fresh ids to the company and any nested employees, then stage it."""
        if company is None:
            raise invalid_argument(message="company is required")

        company.id = uuid.uuid4()
        for employee in company.employees:
            employee.id = uuid.uuid4()

        self.db.add(company)
        return company

    def update_company(self, company: Company) -> Company:
        if company is None:
            raise invalid_argument(message="company is required")
        self.db.add(company)
        return company

    def delete_company(self, company: Company) -> int:
        """
        Explicit cascade: stage deletion of every employee of the company, then the company.
        Returns the number of employees removed. Nothing is committed here.
        """
        if company is None:
            raise invalid_argument(message="company is required")

        removed = self.employee_write.delete_for_company(company.id)
        self.db.delete(company)
        return removed
