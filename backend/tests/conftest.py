"""Pytest configuration and fixtures."""

import os

# Settings are read at import time; never point tests at a real database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import uuid
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.constants.gender import Gender
from app.db.base import Base
from app.db.session import build_engine
from app.main import app
from app.models.company import Company
from app.models.employee import Employee


@pytest.fixture
def engine():
    """In-memory SQLite shared by every connection of one test."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def session(session_factory) -> Session:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_company(session):
    def _make(name: str, introduction: str = "Intro text") -> Company:
        company = Company(name=name, introduction=introduction)
        session.add(company)
        session.commit()
        return company

    return _make


@pytest.fixture
def make_employee(session):
    def _make(
        company: Company,
        employee_no: str,
        first_name: str = "Nick",
        last_name: str = "Carter",
        gender: Gender = Gender.MALE,
        date_of_birth: date = date(1990, 1, 2),
    ) -> Employee:
        employee = Employee(
            id=uuid.uuid4(),
            company_id=company.id,
            employee_no=employee_no,
            first_name=first_name,
            last_name=last_name,
            gender=gender.value,
            date_of_birth=date_of_birth,
        )
        session.add(employee)
        session.commit()
        return employee

    return _make
