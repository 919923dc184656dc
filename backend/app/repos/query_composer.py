"""
query_composer.py
- Purpose: Build list queries from optional filter / search / paging inputs.
- Design: Each present parameter becomes one independent predicate; the base
  query is folded through them with AND. Search predicates OR across fields.
  Blank strings count as absent.
"""

from __future__ import annotations

from typing import Iterable, TypeVar

from sqlalchemy import or_
from sqlalchemy.orm import Query
from sqlalchemy.sql import ColumnElement

from app.constants.gender import Gender
from app.core.errors import invalid_argument
from app.models.company import Company
from app.models.employee import Employee

Q = TypeVar("Q", bound=Query)


def clean_term(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _contains_any(term: str, *columns) -> ColumnElement[bool]:
    # autoescape: "%" and "_" in the term match literally
    return or_(*(col.contains(term, autoescape=True) for col in columns))


def company_predicates(company_name: str | None, search_term: str | None) -> list[ColumnElement[bool]]:
    predicates: list[ColumnElement[bool]] = []

    name = clean_term(company_name)
    if name is not None:
        predicates.append(Company.name == name)

    term = clean_term(search_term)
    if term is not None:
        predicates.append(_contains_any(term, Company.name, Company.introduction))

    return predicates


def employee_predicates(gender: Gender | None, q: str | None) -> list[ColumnElement[bool]]:
    predicates: list[ColumnElement[bool]] = []

    if gender is not None:
        predicates.append(Employee.gender == gender.value)

    term = clean_term(q)
    if term is not None:
        predicates.append(_contains_any(term, Employee.employee_no, Employee.first_name, Employee.last_name))

    return predicates


def apply_predicates(query: Q, predicates: Iterable[ColumnElement[bool]]) -> Q:
    for predicate in predicates:
        query = query.filter(predicate)
    return query


def paginate(query: Q, page_number: int, page_size: int) -> Q:
    """Window [page_size * (page_number - 1), +page_size). Past the end -> empty."""
    if page_number < 1 or page_size < 1:
        raise invalid_argument(message="page_number and page_size must be >= 1")
    return query.offset(page_size * (page_number - 1)).limit(page_size)
