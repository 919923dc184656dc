"""
company_collections.py
- Purpose: Batch create / batch fetch of companies.
- GET takes the ids as a parenthesised, comma-separated list: /api/companycollections/(id1,id2)
"""

from fastapi import APIRouter, Depends, Request, Response, status

from app.api.deps import get_company_service
from app.schemas.company import CompanyAddDto, CompanyDto
from app.services.company_service import CompanyService

router = APIRouter(prefix="/api/companycollections", tags=["Company collections"])


@router.get("/({ids})", response_model=list[CompanyDto])
def get_company_collection(ids: str, svc: CompanyService = Depends(get_company_service)):
    return svc.get_collection(ids)


@router.post("", response_model=list[CompanyDto], status_code=status.HTTP_201_CREATED)
def create_company_collection(
    body: list[CompanyAddDto],
    request: Request,
    response: Response,
    svc: CompanyService = Depends(get_company_service),
):
    created = svc.create_companies(body)
    ids = ",".join(str(c.id) for c in created)
    response.headers["Location"] = str(request.url_for("get_company_collection", ids=ids))
    return created
