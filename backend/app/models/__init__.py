"""
models package
- Purpose: Import all ORM models so Alembic autogenerate discovers them.
- Important: Alembic only sees models that are imported somewhere.
"""

from app.models.company import Company
from app.models.employee import Employee

__all__ = [
    "Company",
    "Employee",
]
