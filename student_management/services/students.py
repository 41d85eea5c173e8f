from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from student_management.core.errors import InvalidRequest, NotFound, StoreConflict
from student_management.core.logging import get_logger
from student_management.core.security import Principal
from student_management.models.student import Student
from student_management.schemas.students import StudentIn, StudentUpdateIn


def _not_found(student_id: int) -> NotFound:
    return NotFound(f"Estudante com ID {student_id} não encontrado")


def _exists(db: Session, student_id: int) -> bool:
    return db.scalar(select(Student.id).where(Student.id == student_id)) is not None


def list_all(db: Session, actor: Principal) -> list[Student]:
    return list(db.scalars(select(Student).order_by(Student.id)))


def get_by_id(db: Session, actor: Principal, student_id: int) -> Student:
    st = db.get(Student, student_id)
    if st is None:
        raise _not_found(student_id)
    return st


def create(db: Session, actor: Principal, payload: StudentIn) -> Student:
    st = Student(**payload.model_dump(include=set(Student.EDITABLE_FIELDS)))
    db.add(st)
    db.commit()
    db.refresh(st)
    get_logger().info("student.created", actor=actor.username, student_id=st.id)
    return st


def update(db: Session, actor: Principal, student_id: int, payload: StudentUpdateIn) -> None:
    """Replaces every editable field of the student.

    A stale write (the UPDATE matched no row) is re-checked against the
    table: a row deleted in the meantime is reported as ``NotFound``,
    anything else as ``StoreConflict``. Nothing is retried.
    """
    if payload.id != student_id:
        raise InvalidRequest("ID do estudante não corresponde")

    st = db.get(Student, student_id)
    if st is None:
        raise _not_found(student_id)

    for field in Student.EDITABLE_FIELDS:
        setattr(st, field, getattr(payload, field))

    log = get_logger().bind(actor=actor.username, student_id=student_id)
    try:
        db.commit()
    except StaleDataError as e:
        db.rollback()
        if not _exists(db, student_id):
            raise _not_found(student_id) from e
        log.error("student.update.conflict", error=str(e))
        raise StoreConflict() from e
    except Exception:
        db.rollback()
        raise
    log.info("student.updated")


def delete(db: Session, actor: Principal, student_id: int) -> None:
    st = db.get(Student, student_id)
    if st is None:
        raise _not_found(student_id)

    db.delete(st)
    db.commit()
    get_logger().info("student.deleted", actor=actor.username, student_id=student_id)
