"""
company.py (schemas)
- Purpose: Request/response DTOs for companies.
- Design: Keep API DTOs stable; mapping from ORM lives in classmethods.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.config import settings
from app.schemas.employee import EmployeeAddDto


class CompanyDto(BaseModel):
    id: UUID
    company_name: str

    @classmethod
    def from_company(cls, company) -> "CompanyDto":
        return cls(id=company.id, company_name=company.name)


class CompanyAddDto(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100)
    introduction: str = Field(min_length=10, max_length=500)
    employees: list[EmployeeAddDto] = Field(default_factory=list)


class CompanyListParams(BaseModel):
    """
    Query parameters for GET /api/companies.
    Blank strings are kept as-is here; the query composer treats them as absent.
    """

    company_name: str | None = None
    search_term: str | None = None
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=settings.DEFAULT_PAGE_SIZE, ge=1)

    @field_validator("page_size")
    @classmethod
    def _clamp_page_size(cls, v: int) -> int:
        return min(v, settings.MAX_PAGE_SIZE)
