"""
Task and subject data models.

These mirror the records owned by the task-management and subjects
subsystems. The recommendation engine only ever reads them.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    """Lifecycle states of a student task."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class Subject(BaseModel):
    """A learning subject with its display colour."""
    name: str = Field(description="Subject name (e.g., 'Mathematics')")
    color: str = Field(default="#64748B", description="Display colour as a hex string")


class Task(BaseModel):
    """A student task record."""
    id: int = Field(description="Task identifier, unique per student")
    title: str = Field(description="Short task title")
    description: Optional[str] = Field(default=None, description="Free-form task description")
    subject: Optional[str] = Field(default=None, description="Subject name the task belongs to")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="Current task status")
    category: str = Field(default="brain", description="Task category tag")
    created_at: datetime = Field(default_factory=datetime.now, description="Creation time")
    completed_at: Optional[datetime] = Field(default=None, description="Completion time, if completed")

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED
