"""
Student data module: JSON-file storage for subjects and tasks.
"""

from .models import StudentDataError, StudentFile, validate_user_id
from .services import StudentDataStore
from .factory import create_student_data_module

__all__ = [
    "StudentDataError",
    "StudentFile",
    "validate_user_id",
    "StudentDataStore",
    "create_student_data_module",
]
