"""API router setup."""
from fastapi import APIRouter

from student_management.api.routes import auth, students

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(students.router)
