# scripts/seed.py
"""Creates the tables and loads the sample users and students.

Uso: ``python scripts/seed.py`` (respeita DATABASE_URL). Rodar de novo não duplica nada.
"""
from __future__ import annotations

from sqlalchemy.orm import Session

from student_management.core.logging import configure_logging
from student_management.core.settings import settings
from student_management.db import get_db
from student_management.db.init_db import init_db


def get_session() -> Session:
    gen = get_db()
    session: Session = next(gen)
    return session


def main() -> None:
    configure_logging(json=False, level=settings.LOG_LEVEL)
    db = get_session()
    try:
        init_db(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
