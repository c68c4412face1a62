"""
Student data file models.

Each student owns one JSON file:

{
  "subjects": [ {"name": str, "color": str}, ... ],
  "tasks": [ {"id": int, "title": str, "subject": str|None, "status": str,
              "category": str, "created_at": ISO8601, "completed_at": ISO8601|None}, ... ]
}
"""
import json
import re
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError

from learning_service.models import Subject, Task

_USER_ID_RE = re.compile(r"^[A-Za-z0-9_.@-]+$")


class StudentDataError(Exception):
    """Raised when student data cannot be read or written."""


def validate_user_id(user_id: str) -> str:
    """Return the stripped user id, rejecting anything unsafe as a filename."""
    uid = (user_id or "").strip()
    if not uid or not _USER_ID_RE.match(uid) or uid.startswith("."):
        raise StudentDataError(f"Invalid user id: {user_id!r}")
    return uid


class StudentFile:
    """JSON file holding one student's subjects and tasks."""

    def __init__(self, user_id: str, data_dir: Path):
        self.user_id = validate_user_id(user_id)
        self.data_dir = data_dir
        self.path = data_dir / f"{self.user_id}.json"

    def load(self) -> Dict[str, Any]:
        """Load the raw file; a missing file is an empty student."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            data = {}
        except (OSError, ValueError) as e:
            raise StudentDataError(f"Failed to read data for {self.user_id}: {e}") from e

        if not isinstance(data, dict):
            raise StudentDataError(f"Data file for {self.user_id} is not a JSON object")

        subjects = data.get("subjects")
        tasks = data.get("tasks")
        data["subjects"] = subjects if isinstance(subjects, list) else []
        data["tasks"] = tasks if isinstance(tasks, list) else []
        return data

    def save(self, data: Dict[str, Any]) -> None:
        """Write the whole file back."""
        try:
            self.path.write_text(
                json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8"
            )
        except OSError as e:
            raise StudentDataError(f"Failed to write data for {self.user_id}: {e}") from e

    def load_subjects(self) -> List[Subject]:
        return self.parse_records(Subject, self.load()["subjects"])

    def load_tasks(self) -> List[Task]:
        return self.parse_records(Task, self.load()["tasks"])

    def parse_records(self, model, items: List[Any]) -> list:
        """Validate raw records into models, wrapping validation failures."""
        try:
            return [model.model_validate(item) for item in items]
        except ValidationError as e:
            raise StudentDataError(
                f"Invalid {model.__name__.lower()} record for {self.user_id}: {e}"
            ) from e
