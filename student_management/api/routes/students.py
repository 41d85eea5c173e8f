from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.orm import Session

from student_management.core.security import Principal
from student_management.db import get_db
from student_management.deps import get_current_principal
from student_management.schemas.students import (
    MAX_INT,
    StudentIn,
    StudentOut,
    StudentUpdateIn,
)
from student_management.services import students as student_service

# o gate roda antes de qualquer acesso ao banco
router = APIRouter(prefix="/students", tags=["students"])

CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
StudentId = Annotated[int, Path(le=MAX_INT)]


@router.get("", response_model=list[StudentOut])
def list_students(current: CurrentPrincipal, db: Session = Depends(get_db)):
    return [StudentOut.model_validate(s) for s in student_service.list_all(db, current)]


@router.get("/{student_id}", response_model=StudentOut)
def get_student(student_id: StudentId, current: CurrentPrincipal, db: Session = Depends(get_db)):
    return StudentOut.model_validate(student_service.get_by_id(db, current, student_id))


@router.post("", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def create_student(
    payload: StudentIn,
    request: Request,
    response: Response,
    current: CurrentPrincipal,
    db: Session = Depends(get_db),
):
    st = student_service.create(db, current, payload)
    response.headers["Location"] = str(request.url_for("get_student", student_id=st.id))
    return StudentOut.model_validate(st)


@router.put("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_student(
    student_id: StudentId,
    payload: StudentUpdateIn,
    current: CurrentPrincipal,
    db: Session = Depends(get_db),
) -> Response:
    student_service.update(db, current, student_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: StudentId, current: CurrentPrincipal, db: Session = Depends(get_db)) -> Response:
    student_service.delete(db, current, student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
