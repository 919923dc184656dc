"""
db/seed.py
- Purpose: Demo companies/employees with fixed ids (same rows as the initial migration).
- Only inserts into an empty companies table.
"""

import logging
import uuid
from datetime import date, datetime, timedelta

from sqlalchemy.orm import Session

from app.constants.gender import Gender
from app.models.company import Company
from app.models.employee import Employee

logger = logging.getLogger("app.db.seed")

SEEDED_AT = datetime(2024, 5, 10, 17, 24, 58)

SEED_COMPANIES = [
    ("bbdee09c-089b-4d30-bece-44df5923716c", "Microsoft", "Great Company"),
    ("6fb600c1-9011-4fd7-9234-881379716440", "Google", "Don't be evil"),
    ("5efc910b-2f45-43df-afae-620d40542853", "Alipapa", "Fubao Company"),
    ("bbdee09c-089b-4d30-bece-44df59237100", "Tencent", "From Shenzhen"),
    ("6fb600c1-9011-4fd7-9234-881379716400", "Baidu", "From Beijing"),
    ("5efc910b-2f45-43df-afae-620d40542800", "Adobe", "Photoshop?"),
    ("bbdee09c-089b-4d30-bece-44df59237111", "SpaceX", "Wow"),
    ("6fb600c1-9011-4fd7-9234-881379716411", "AC Milan", "Football Club"),
    ("5efc910b-2f45-43df-afae-620d40542811", "Suning", "From Jiangsu"),
    ("bbdee09c-089b-4d30-bece-44df59237122", "Twitter", "Blocked"),
    ("6fb600c1-9011-4fd7-9234-881379716422", "Youtube", "Blocked"),
    ("5efc910b-2f45-43df-afae-620d40542822", "360", "- -"),
    ("bbdee09c-089b-4d30-bece-44df59237133", "Jingdong", "Brothers"),
    ("6fb600c1-9011-4fd7-9234-881379716433", "NetEase", "Music?"),
    ("5efc910b-2f45-43df-afae-620d40542833", "Amazon", "Store"),
    ("bbdee09c-089b-4d30-bece-44df59237144", "AOL", "Not Exists?"),
    ("6fb600c1-9011-4fd7-9234-881379716444", "Yahoo", "Who?"),
    ("5efc910b-2f45-43df-afae-620d40542844", "Firefox", "Is it a company?"),
]


# (id, company_id, employee_no, first_name, last_name, gender, date_of_birth)
SEED_EMPLOYEES = [
    ("4b501cb3-d168-4cc0-b375-48fb33f318a4", "bbdee09c-089b-4d30-bece-44df5923716c", "MSFT231", "Nick", "Carter", Gender.MALE, date(1976, 1, 2)),
    ("7eaa532c-1be5-472c-a738-94fd26e5fad6", "bbdee09c-089b-4d30-bece-44df5923716c", "MSFT245", "Vince", "Carter", Gender.MALE, date(1981, 12, 5)),
    ("72457e73-ea34-4e02-b575-8d384e82a481", "6fb600c1-9011-4fd7-9234-881379716440", "G003", "Mary", "King", Gender.FEMALE, date(1986, 11, 4)),
    ("7644b71d-d74e-43e2-ac32-8cbadd7b1c3a", "6fb600c1-9011-4fd7-9234-881379716440", "G097", "Kevin", "Richardson", Gender.MALE, date(1977, 4, 6)),
    ("679dfd33-32e4-4393-b061-f7abb8956f53", "5efc910b-2f45-43df-afae-620d40542853", "A009", "卡", "里", Gender.FEMALE, date(1967, 1, 24)),
    ("1861341e-b42b-410c-ae21-cf11f36fc574", "5efc910b-2f45-43df-afae-620d40542853", "A404", "Not", "Man", Gender.MALE, date(1957, 3, 8)),
]


def seeded_at(index: int) -> datetime:
    """One second apart, in list order, so the default listing order is stable."""
    return SEEDED_AT + timedelta(seconds=index)


def seed_demo_data(db: Session) -> bool:
    """Returns True if rows were inserted, False if the database already had companies."""
    if db.query(Company.id).first() is not None:
        return False

    for i, (company_id, name, introduction) in enumerate(SEED_COMPANIES):
        db.add(
            Company(
                id=uuid.UUID(company_id),
                name=name,
                introduction=introduction,
                created_at=seeded_at(i),
            )
        )
    # Parent rows first so the FK check passes on insert
    db.flush()

    for i, (emp_id, company_id, employee_no, first_name, last_name, gender, dob) in enumerate(SEED_EMPLOYEES):
        db.add(
            Employee(
                id=uuid.UUID(emp_id),
                company_id=uuid.UUID(company_id),
                employee_no=employee_no,
                first_name=first_name,
                last_name=last_name,
                gender=gender.value,
                date_of_birth=dob,
                created_at=seeded_at(i),
            )
        )
    db.commit()

    logger.info("seed.inserted", extra={"companies": len(SEED_COMPANIES), "employees": len(SEED_EMPLOYEES)})
    return True
