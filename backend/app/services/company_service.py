# app/services/company_service.py
"""
company_service.py
- Purpose: Company use-cases (list/search/page, lookup, create, collections, delete).
- Owns: existence checks, DTO mapping, one save() per call.
- Design: Thick service; routers remain thin.
"""

import logging
from datetime import timedelta
from uuid import UUID

from sqlalchemy.orm import Session

from app.core import ErrorReason
from app.core.errors import not_found, validation_failed
from app.core.request_context import set_context
from app.models.company import utcnow
from app.repos.company.read import CompanyReadRepo
from app.repos.company.write import CompanyWriteRepo
from app.schemas.company import CompanyAddDto, CompanyDto, CompanyListParams
from app.services.mapping import company_from_dto
from app.validations.employee_validators import employee_rule_errors
from app.validations.id_validators import parse_id_list

logger = logging.getLogger("app.company_service")


class CompanyService:
    def __init__(self, db: Session):
        self.db = db

        self.company_read = CompanyReadRepo(db)
        self.company_write = CompanyWriteRepo(db)

    def list_companies(self, params: CompanyListParams) -> list[CompanyDto]:
        companies = self.company_read.list_companies(params)
        return [CompanyDto.from_company(c) for c in companies]

    def get_company(self, company_id: UUID) -> CompanyDto:
        company = self.company_read.get_by_id(company_id)
        if not company:
            raise not_found(ErrorReason.COMPANY_NOT_FOUND, details={"company_id": str(company_id)})
        return CompanyDto.from_company(company)

    def create_company(self, dto: CompanyAddDto) -> CompanyDto:
        _check_nested_employees([(dto, "employees")])
        return self._add_all([dto])[0]

    def create_companies(self, dtos: list[CompanyAddDto]) -> list[CompanyDto]:
        """Create every company (with nested employees) in one transaction."""
        _check_nested_employees([(dto, f"{i}.employees") for i, dto in enumerate(dtos)])
        return self._add_all(dtos)

    def _add_all(self, dtos: list[CompanyAddDto]) -> list[CompanyDto]:
        # Request order is the listing order, even within one flush
        stamp = utcnow()
        companies = []
        for i, dto in enumerate(dtos):
            company = company_from_dto(dto)
            company.created_at = stamp + timedelta(microseconds=i)
            companies.append(self.company_write.add_company(company))
        self.company_write.save()

        for company in companies:
            logger.info(
                "company.created",
                extra={"company_id": str(company.id), "employee_count": len(company.employees)},
            )
        return [CompanyDto.from_company(c) for c in companies]

    def get_collection(self, raw_ids: str) -> list[CompanyDto]:
        """
        raw_ids: comma-separated ids. Every (distinct) id must exist, else NotFound.
        Result is ordered by company name.
        """
        ids = parse_id_list(raw_ids)
        wanted = set(ids)

        companies = self.company_read.list_by_ids(wanted)
        if len(companies) != len(wanted):
            missing = wanted - {c.id for c in companies}
            raise not_found(
                ErrorReason.COMPANY_NOT_FOUND,
                details={"missing_ids": sorted(str(i) for i in missing)},
            )
        return [CompanyDto.from_company(c) for c in companies]

    def delete_company(self, company_id: UUID) -> None:
        company = self.company_read.get_by_id(company_id)
        if not company:
            raise not_found(ErrorReason.COMPANY_NOT_FOUND, details={"company_id": str(company_id)})

        set_context(company_id=str(company_id))
        removed = self.company_write.delete_company(company)
        self.company_write.save()

        logger.info("company.deleted", extra={"employees_removed": removed})


def _check_nested_employees(located: list[tuple[CompanyAddDto, str]]) -> None:
    """Rule errors for every nested employee, reported at its body path."""
    errors = [
        err
        for dto, path in located
        for j, employee in enumerate(dto.employees)
        for err in employee_rule_errors(employee, f"{path}.{j}")
    ]
    if errors:
        raise validation_failed(errors)
