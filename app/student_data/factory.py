"""
Factory for creating the student data module.
"""
from pathlib import Path

from .services import StudentDataStore


def create_student_data_module(data_dir: Path) -> dict:
    """Create the student data module.

    Args:
        data_dir: Directory holding one JSON file per student

    Returns:
        Dictionary with:
        - store: StudentDataStore instance
    """
    store = StudentDataStore(data_dir)

    return {
        "store": store
    }
