import uuid
from datetime import date

import pytest

from app.constants.gender import Gender
from app.core import AppError, ErrorCode
from app.schemas.employee import EmployeeAddDto
from app.validations.employee_validators import (
    employee_rule_errors,
    parse_gender,
    validate_employee_payload,
    validate_employee_rules,
)
from app.validations.field_errors import field_errors_from
from app.validations.id_validators import NIL_UUID, parse_id_list, require_id


def _employee(**overrides):
    data = {
        "employee_no": "EMP0000001",
        "first_name": "Nick",
        "last_name": "Carter",
        "gender": "Male",
        "date_of_birth": date(1990, 1, 2),
    }
    data.update(overrides)
    return data


def test_parse_gender_exact_labels():
    assert parse_gender("Male") is Gender.MALE
    assert parse_gender(" Female ") is Gender.FEMALE


@pytest.mark.parametrize("blank", [None, "", "   "])
def test_parse_gender_blank_means_no_filter(blank):
    assert parse_gender(blank) is None


@pytest.mark.parametrize("label", ["male", "FEMALE", "Other", "0"])
def test_parse_gender_rejects_unknown_labels(label):
    with pytest.raises(AppError) as ei:
        parse_gender(label)
    assert ei.value.code == ErrorCode.INVALID_ARGUMENT
    assert ei.value.status_code == 400
    assert ei.value.details == {"allowed": ["Male", "Female"]}


def test_require_id():
    some = uuid.uuid4()
    assert require_id(some, "company_id") == some

    for bad in (None, NIL_UUID):
        with pytest.raises(AppError) as ei:
            require_id(bad, "company_id")
        assert ei.value.code == ErrorCode.INVALID_ARGUMENT


def test_parse_id_list():
    a, b = uuid.uuid4(), uuid.uuid4()
    assert parse_id_list(f"{a}, {b},") == [a, b]


@pytest.mark.parametrize("raw", [None, "", "  ", ",,", "not-a-uuid", f"{uuid.uuid4()},nope"])
def test_parse_id_list_rejects_bad_input(raw):
    with pytest.raises(AppError) as ei:
        parse_id_list(raw)
    assert ei.value.code == ErrorCode.INVALID_ARGUMENT


def test_rules_accept_valid_employee():
    validate_employee_rules(EmployeeAddDto(**_employee()))


def test_rules_employee_no_must_differ_from_first_name():
    dto = EmployeeAddDto(**_employee(employee_no="NickCarter", first_name="NickCarter"))
    with pytest.raises(AppError) as ei:
        validate_employee_rules(dto)
    assert ei.value.code == ErrorCode.VALIDATION_FAILED
    assert [e["field"] for e in ei.value.details["errors"]] == ["employee_no"]


def test_rules_first_and_last_name_must_differ():
    dto = EmployeeAddDto(**_employee(first_name="Carter", last_name="Carter"))
    with pytest.raises(AppError) as ei:
        validate_employee_rules(dto)
    assert [e["field"] for e in ei.value.details["errors"]] == ["first_name", "last_name"]


def test_rule_errors_carry_nested_path():
    dto = EmployeeAddDto(**_employee(first_name="Carter", last_name="Carter"))
    errors = employee_rule_errors(dto, "employees.2")
    assert [e["field"] for e in errors] == ["employees.2.first_name", "employees.2.last_name"]


def test_payload_validation_lists_every_field():
    with pytest.raises(AppError) as ei:
        validate_employee_payload({"first_name": "Nick"})
    err = ei.value
    assert err.code == ErrorCode.VALIDATION_FAILED
    fields = {e["field"] for e in err.details["errors"]}
    assert fields == {"employee_no", "last_name", "gender", "date_of_birth"}


def test_payload_validation_checks_lengths():
    with pytest.raises(AppError) as ei:
        validate_employee_payload(_employee(employee_no="SHORT", last_name="x" * 51))
    fields = {e["field"] for e in ei.value.details["errors"]}
    assert fields == {"employee_no", "last_name"}


def test_field_errors_strip_location_prefix():
    errors = [
        {"loc": ("body", "employees", 0, "first_name"), "msg": "Field required"},
        {"loc": ("query", "page_size"), "msg": "Input should be greater than or equal to 1"},
    ]
    assert field_errors_from(errors) == [
        {"field": "employees.0.first_name", "message": "Field required"},
        {"field": "page_size", "message": "Input should be greater than or equal to 1"},
    ]
