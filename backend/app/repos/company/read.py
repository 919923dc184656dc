"""
company/read.py
- Purpose: Read-side DB operations for Company.
- Design: Keep query logic here for reuse and testability.
"""

from typing import Iterable
from uuid import UUID

from sqlalchemy import exists
from sqlalchemy.orm import Session

from app.core.errors import invalid_argument
from app.models.company import Company
from app.repos.query_composer import apply_predicates, company_predicates, paginate
from app.schemas.company import CompanyListParams
from app.validations.id_validators import require_id


class CompanyReadRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_companies(self, params: CompanyListParams) -> list[Company]:
        """
        No name filter and no search term -> every company, unpaginated.
        Otherwise filter AND search, then the page window.
        """
        if params is None:
            raise invalid_argument(message="list parameters are required")

        # id breaks created_at ties so page windows never overlap
        query = self.db.query(Company).order_by(Company.created_at, Company.id)

        predicates = company_predicates(params.company_name, params.search_term)
        if not predicates:
            return query.all()

        query = apply_predicates(query, predicates)
        return paginate(query, params.page_number, params.page_size).all()

    def get_by_id(self, company_id: UUID) -> Company | None:
        require_id(company_id, "company_id")
        return self.db.query(Company).filter(Company.id == company_id).first()

    def list_by_ids(self, company_ids: Iterable[UUID]) -> list[Company]:
        if company_ids is None:
            raise invalid_argument(message="company_ids are required")
        return (
            self.db.query(Company)
            .filter(Company.id.in_(list(company_ids)))
            .order_by(Company.name)
            .all()
        )

    def exists(self, company_id: UUID) -> bool:
        require_id(company_id, "company_id")
        return bool(self.db.query(exists().where(Company.id == company_id)).scalar())
