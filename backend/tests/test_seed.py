import uuid

from app.db.seed import SEED_COMPANIES, SEED_EMPLOYEES, seed_demo_data
from app.models.company import Company
from app.models.employee import Employee
from app.repos.company.read import CompanyReadRepo
from app.repos.employee.read import EmployeeReadRepo
from app.schemas.company import CompanyListParams


def test_seed_inserts_once(session):
    assert seed_demo_data(session) is True
    assert session.query(Company).count() == len(SEED_COMPANIES)
    assert session.query(Employee).count() == len(SEED_EMPLOYEES)

    assert seed_demo_data(session) is False
    assert session.query(Company).count() == len(SEED_COMPANIES)


def test_seeded_employees_are_queryable(session):
    seed_demo_data(session)
    microsoft = uuid.UUID("bbdee09c-089b-4d30-bece-44df5923716c")

    employees = EmployeeReadRepo(session).list_for_company(microsoft)
    assert [e.employee_no for e in employees] == ["MSFT231", "MSFT245"]


def test_seed_skips_non_empty_database(session, make_company):
    make_company("Already here")
    assert seed_demo_data(session) is False
    assert session.query(Company).count() == 1


def test_seeded_companies_list_in_seed_order(session):
    seed_demo_data(session)

    companies = CompanyReadRepo(session).list_companies(CompanyListParams())
    assert len({c.created_at for c in companies}) == len(SEED_COMPANIES)
    assert [str(c.id) for c in companies] == [cid for cid, _, _ in SEED_COMPANIES]
