import pytest

from app.constants.gender import Gender
from app.core import AppError, ErrorCode
from app.models.company import Company
from app.repos.company.read import CompanyReadRepo
from app.repos.employee.read import EmployeeReadRepo
from app.repos.query_composer import (
    apply_predicates,
    clean_term,
    company_predicates,
    employee_predicates,
    paginate,
)
from app.schemas.company import CompanyListParams


@pytest.fixture
def three_companies(make_company):
    return [make_company("A Co"), make_company("B Co"), make_company("AB Co")]


def _names(companies):
    return [c.name for c in companies]


def _list(session, **kwargs):
    return _names(CompanyReadRepo(session).list_companies(CompanyListParams(**kwargs)))


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
def test_clean_term_blank_is_absent(value):
    assert clean_term(value) is None


def test_clean_term_trims():
    assert clean_term("  A Co ") == "A Co"


def test_predicates_only_for_present_params():
    assert company_predicates(None, None) == []
    assert company_predicates(" ", "") == []
    assert len(company_predicates("A Co", None)) == 1
    assert len(company_predicates("A Co", "A")) == 2

    assert employee_predicates(None, "  ") == []
    assert len(employee_predicates(Gender.FEMALE, "x")) == 2


def test_search_is_substring_over_name(session, three_companies):
    assert _list(session, search_term="A") == ["A Co", "AB Co"]


def test_filter_is_exact_match(session, three_companies):
    assert _list(session, company_name="A Co") == ["A Co"]
    assert _list(session, company_name="A") == []


def test_filter_and_search_are_trimmed(session, three_companies):
    assert _list(session, company_name="  A Co  ") == ["A Co"]
    assert _list(session, search_term="  AB ") == ["AB Co"]


def test_search_covers_introduction(session, make_company):
    make_company("Acme", "Builds rockets and more")
    make_company("Other", "Sells shoes everywhere")

    assert _list(session, search_term="rockets") == ["Acme"]


def test_filter_and_search_intersect(session, three_companies):
    assert _list(session, company_name="AB Co", search_term="B") == ["AB Co"]
    # disjoint criteria -> empty intersection
    assert _list(session, company_name="A Co", search_term="B") == []


def test_blank_arguments_behave_like_omitted(session, three_companies):
    omitted = _list(session, page_size=1)
    blank = _list(session, company_name="  ", search_term="", page_size=1)
    assert blank == omitted


def test_no_criteria_returns_everything_unpaginated(session, three_companies):
    assert _list(session, page_number=2, page_size=1) == ["A Co", "B Co", "AB Co"]


def test_paginate_second_item_of_three(session, three_companies):
    query = session.query(Company).order_by(Company.created_at)
    assert _names(paginate(query, page_number=2, page_size=1).all()) == ["B Co"]


def test_pages_cover_filtered_result_without_duplicates(session, three_companies):
    full = _list(session, search_term="Co", page_size=20)
    assert full == ["A Co", "B Co", "AB Co"]

    pages = [_list(session, search_term="Co", page_number=n, page_size=2) for n in (1, 2)]
    assert all(len(p) <= 2 for p in pages)
    assert pages[0] + pages[1] == full


def test_page_past_the_end_is_empty(session, three_companies):
    assert _list(session, search_term="Co", page_number=5, page_size=2) == []


def test_paginate_rejects_non_positive_window(session):
    with pytest.raises(AppError) as ei:
        paginate(session.query(Company), page_number=0, page_size=5)
    assert ei.value.code == ErrorCode.INVALID_ARGUMENT


def test_page_size_is_clamped():
    assert CompanyListParams(page_size=500).page_size == 20


def test_search_wildcards_match_literally(session, make_company):
    make_company("100% Cotton")
    make_company("Plain")

    assert _list(session, search_term="%") == ["100% Cotton"]
    assert _list(session, search_term="_") == []


def test_apply_predicates_folds_with_and(session, three_companies):
    preds = company_predicates("AB Co", "A")
    rows = apply_predicates(session.query(Company), preds).all()
    assert _names(rows) == ["AB Co"]


def test_employees_sorted_by_employee_no(session, make_company, make_employee):
    company = make_company("A Co")
    make_employee(company, "E3", first_name="Zed")
    make_employee(company, "E1", first_name="Amy", gender=Gender.FEMALE)
    make_employee(company, "E2", first_name="Bob")

    repo = EmployeeReadRepo(session)
    assert [e.employee_no for e in repo.list_for_company(company.id)] == ["E1", "E2", "E3"]
    assert [e.employee_no for e in repo.list_for_company(company.id, "Male")] == ["E2", "E3"]
    assert [e.employee_no for e in repo.list_for_company(company.id, None, "e")] == ["E1", "E2", "E3"]


def test_employee_search_covers_three_fields(session, make_company, make_employee):
    company = make_company("A Co")
    make_employee(company, "X100", first_name="Nick", last_name="Carter")
    make_employee(company, "X200", first_name="Mary", last_name="King", gender=Gender.FEMALE)
    make_employee(company, "Y300", first_name="Kevin", last_name="Rich")

    repo = EmployeeReadRepo(session)
    assert [e.employee_no for e in repo.list_for_company(company.id, q="X")] == ["X100", "X200"]
    assert [e.employee_no for e in repo.list_for_company(company.id, q="Mary")] == ["X200"]
    assert [e.employee_no for e in repo.list_for_company(company.id, q="Rich")] == ["Y300"]
    assert [e.employee_no for e in repo.list_for_company(company.id, "Female", "X")] == ["X200"]


def test_employee_listing_is_scoped_to_company(session, make_company, make_employee):
    a = make_company("A Co")
    b = make_company("B Co")
    make_employee(a, "A1")
    make_employee(b, "B1")

    assert [e.employee_no for e in EmployeeReadRepo(session).list_for_company(a.id)] == ["A1"]


@pytest.mark.parametrize("label", ["male", "MALE", "Unknown", "1"])
def test_invalid_gender_label_fails(session, make_company, make_employee, label):
    company = make_company("A Co")
    make_employee(company, "E1")

    with pytest.raises(AppError) as ei:
        EmployeeReadRepo(session).list_for_company(company.id, label)
    assert ei.value.code == ErrorCode.INVALID_ARGUMENT
