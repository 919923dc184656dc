"""
employee/read.py
- Purpose: Read-side DB operations for Employee.
"""

from uuid import UUID

from sqlalchemy.orm import Session

from app.models.employee import Employee
from app.repos.query_composer import apply_predicates, employee_predicates
from app.validations.employee_validators import parse_gender
from app.validations.id_validators import require_id


class EmployeeReadRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_for_company(
        self,
        company_id: UUID,
        gender_display: str | None = None,
        q: str | None = None,
    ) -> list[Employee]:
        """Employees of one company, optionally filtered by gender and searched, ordered by employee_no."""
        require_id(company_id, "company_id")
        # Parse before touching the DB: a bad label fails the whole call
        gender = parse_gender(gender_display)

        query = self.db.query(Employee).filter(Employee.company_id == company_id)
        query = apply_predicates(query, employee_predicates(gender, q))
        return query.order_by(Employee.employee_no).all()

    def get_for_company(self, company_id: UUID, employee_id: UUID) -> Employee | None:
        require_id(company_id, "company_id")
        require_id(employee_id, "employee_id")
        return (
            self.db.query(Employee)
            .filter(Employee.company_id == company_id, Employee.id == employee_id)
            .first()
        )
