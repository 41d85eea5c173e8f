# Garante o registro de TODAS as models no mesmo registry
from student_management.db.base_class import Base  # noqa
from student_management.models.student import Student  # noqa
from student_management.models.user import User  # noqa
