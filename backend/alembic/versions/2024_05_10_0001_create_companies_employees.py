"""create companies and employees, insert seed rows

Revision ID: 0001
Revises:
Create Date: 2024-05-10 17:24:58

"""
from typing import Sequence, Union
import uuid

from alembic import op
import sqlalchemy as sa

from app.db.seed import SEED_COMPANIES, SEED_EMPLOYEES, seeded_at


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    companies = op.create_table(
        "companies",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("introduction", sa.String(length=500), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=False), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    employees = op.create_table(
        "employees",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("company_id", sa.Uuid(), nullable=False),
        sa.Column("employee_no", sa.String(length=10), nullable=False),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("gender", sa.String(length=16), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=False), nullable=False),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_employees_company_employee_no", "employees", ["company_id", "employee_no"])

    op.bulk_insert(
        companies,
        [
            {"id": uuid.UUID(cid), "name": name, "introduction": intro, "created_at": seeded_at(i)}
            for i, (cid, name, intro) in enumerate(SEED_COMPANIES)
        ],
    )
    op.bulk_insert(
        employees,
        [
            {
                "id": uuid.UUID(eid),
                "company_id": uuid.UUID(cid),
                "employee_no": employee_no,
                "first_name": first_name,
                "last_name": last_name,
                "gender": gender.value,
                "date_of_birth": dob,
                "created_at": seeded_at(i),
            }
            for i, (eid, cid, employee_no, first_name, last_name, gender, dob) in enumerate(SEED_EMPLOYEES)
        ],
    )


def downgrade() -> None:
    op.drop_index("ix_employees_company_employee_no", table_name="employees")
    op.drop_table("employees")
    op.drop_table("companies")
