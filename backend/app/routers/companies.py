"""
companies.py
- Purpose: API routes for companies.
- Design: Keep router thin. Delegate business logic to services.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status

from app.api.deps import get_company_service
from app.schemas.company import CompanyAddDto, CompanyDto, CompanyListParams
from app.services.company_service import CompanyService

router = APIRouter(prefix="/api/companies", tags=["Companies"])


@router.api_route("", methods=["GET", "HEAD"], response_model=list[CompanyDto])
def get_companies(
    params: Annotated[CompanyListParams, Query()],
    svc: CompanyService = Depends(get_company_service),
):
    return svc.list_companies(params)


@router.get("/{company_id}", response_model=CompanyDto)
def get_company(company_id: UUID, svc: CompanyService = Depends(get_company_service)):
    return svc.get_company(company_id)


@router.post("", response_model=CompanyDto, status_code=status.HTTP_201_CREATED)
def create_company(
    body: CompanyAddDto,
    request: Request,
    response: Response,
    svc: CompanyService = Depends(get_company_service),
):
    created = svc.create_company(body)
    response.headers["Location"] = str(request.url_for("get_company", company_id=str(created.id)))
    return created


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_company(company_id: UUID, svc: CompanyService = Depends(get_company_service)):
    svc.delete_company(company_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.options("")
def get_companies_options():
    return Response(status_code=status.HTTP_200_OK, headers={"Allow": "GET, POST, OPTIONS"})
