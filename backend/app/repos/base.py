"""
repos/base.py
- Purpose: Shared unit-of-work commit for write repos.
- Design: Writes only stage changes on the session; save() persists them atomically.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger("app.repos")


class WriteRepo:
    def __init__(self, db: Session):
        self.db = db

    def save(self) -> bool:
        """
        Commit everything staged on the session.
        On failure the session is rolled back and the store error is re-raised as-is (no retry).
        """
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error("repo.save_failed", exc_info=True)
            raise
        return True
