"""
Student data store backed by one JSON file per student.

This is the storage collaborator the recommendation engine reads from.
Write helpers exist for the maintenance CLI and tests.
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from learning_service.models import Subject, Task, TaskStatus
from learning_service.recommendations import DEFAULT_SUBJECTS

from .models import StudentDataError, StudentFile

logger = logging.getLogger(__name__)


class StudentDataStore:
    """Reads and writes student subjects and tasks."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _file(self, user_id: str) -> StudentFile:
        return StudentFile(user_id, self.data_dir)

    # Reads -------------------------------------------------------------------

    def get_subjects(self, user_id: str) -> List[Subject]:
        """Get the user's subject list."""
        return self._file(user_id).load_subjects()

    def get_tasks(self, user_id: str, status: Optional[TaskStatus] = None) -> List[Task]:
        """Get the user's tasks, optionally filtered by status."""
        tasks = self._file(user_id).load_tasks()
        if status is None:
            return tasks
        return [task for task in tasks if task.status == status]

    def get_completed_tasks(self, user_id: str) -> List[Task]:
        """Get the user's completed tasks."""
        return self.get_tasks(user_id, TaskStatus.COMPLETED)

    def list_user_ids(self) -> List[str]:
        """List every student with a data file."""
        return sorted(path.stem for path in self.data_dir.glob("*.json"))

    # Writes ------------------------------------------------------------------

    def add_subject(self, user_id: str, name: str, color: str = "#64748B") -> Subject:
        """Add a subject; names must be unique per student."""
        name = (name or "").strip()
        if not name:
            raise StudentDataError("Subject name cannot be empty")

        student = self._file(user_id)
        data = student.load()
        if any(item.get("name") == name for item in data["subjects"]):
            raise StudentDataError(f"Subject already exists: {name}")

        subject = Subject(name=name, color=color)
        data["subjects"].append(subject.model_dump(mode="json"))
        student.save(data)
        logger.info("Added subject %s for %s", name, student.user_id)
        return subject

    def seed_default_subjects(self, user_id: str) -> List[Subject]:
        """Add any default subjects the student is missing; return the ones added."""
        student = self._file(user_id)
        data = student.load()
        existing = {item.get("name") for item in data["subjects"]}

        added = [subject for subject in DEFAULT_SUBJECTS if subject.name not in existing]
        data["subjects"].extend(subject.model_dump(mode="json") for subject in added)
        if added:
            student.save(data)
            logger.info("Seeded %d default subject(s) for %s", len(added), student.user_id)
        return added

    def add_task(
        self,
        user_id: str,
        title: str,
        subject: Optional[str] = None,
        category: str = "brain",
        status: TaskStatus = TaskStatus.PENDING,
        description: Optional[str] = None,
    ) -> Task:
        """Create a task with the next free id."""
        title = (title or "").strip()
        if not title:
            raise StudentDataError("Task title cannot be empty")

        student = self._file(user_id)
        data = student.load()
        next_id = max((item.get("id", 0) for item in data["tasks"]), default=0) + 1
        now = datetime.now().astimezone()

        task = Task(
            id=next_id,
            title=title,
            description=description,
            subject=subject or None,
            status=status,
            category=category,
            created_at=now,
            completed_at=now if status == TaskStatus.COMPLETED else None,
        )
        data["tasks"].append(task.model_dump(mode="json"))
        student.save(data)
        return task

    def update_task_status(self, user_id: str, task_id: int, status: TaskStatus) -> Task:
        """Change a task's status, stamping or clearing completed_at."""
        student = self._file(user_id)
        data = student.load()

        tasks = student.parse_records(Task, data["tasks"])
        for index, task in enumerate(tasks):
            if task.id != task_id:
                continue
            completed_at = task.completed_at
            if status == TaskStatus.COMPLETED:
                completed_at = completed_at or datetime.now().astimezone()
            else:
                completed_at = None
            updated = task.model_copy(update={"status": status, "completed_at": completed_at})
            data["tasks"][index] = updated.model_dump(mode="json")
            student.save(data)
            return updated

        raise StudentDataError(f"Task {task_id} not found for {student.user_id}")
