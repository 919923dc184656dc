"""
employees.py
- Purpose: API routes for the employees of one company.
- Design: Keep router thin. Status codes: 201 + Location on create/upsert, 204 on update/delete.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.api.deps import get_employee_service
from app.schemas.employee import EmployeeAddDto, EmployeeDto, EmployeePatchDto, EmployeeUpdateDto
from app.services.employee_service import EmployeeService

router = APIRouter(prefix="/api/companies/{company_id}/employees", tags=["Employees"])


def _created(request: Request, employee: EmployeeDto) -> JSONResponse:
    location = request.url_for(
        "get_employee_for_company",
        company_id=str(employee.company_id),
        employee_id=str(employee.id),
    )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=jsonable_encoder(employee),
        headers={"Location": str(location)},
    )


@router.get("", response_model=list[EmployeeDto])
def get_employees_for_company(
    company_id: UUID,
    gender_display: str | None = None,
    q: str | None = None,
    svc: EmployeeService = Depends(get_employee_service),
):
    return svc.list_employees(company_id, gender_display, q)


@router.get("/{employee_id}", response_model=EmployeeDto)
def get_employee_for_company(
    company_id: UUID,
    employee_id: UUID,
    svc: EmployeeService = Depends(get_employee_service),
):
    return svc.get_employee(company_id, employee_id)


@router.post("", response_model=EmployeeDto, status_code=status.HTTP_201_CREATED)
def create_employee_for_company(
    company_id: UUID,
    body: EmployeeAddDto,
    request: Request,
    svc: EmployeeService = Depends(get_employee_service),
):
    return _created(request, svc.create_employee(company_id, body))


@router.put("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_employee_for_company(
    company_id: UUID,
    employee_id: UUID,
    body: EmployeeUpdateDto,
    request: Request,
    svc: EmployeeService = Depends(get_employee_service),
):
    employee, created = svc.update_employee(company_id, employee_id, body)
    if created:
        return _created(request, employee)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def partially_update_employee_for_company(
    company_id: UUID,
    employee_id: UUID,
    body: EmployeePatchDto,
    request: Request,
    svc: EmployeeService = Depends(get_employee_service),
):
    employee, created = svc.patch_employee(company_id, employee_id, body)
    if created:
        return _created(request, employee)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee_for_company(
    company_id: UUID,
    employee_id: UUID,
    svc: EmployeeService = Depends(get_employee_service),
):
    svc.delete_employee(company_id, employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
