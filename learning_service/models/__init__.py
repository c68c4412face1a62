"""
Models package for student learning data.

This package contains the pydantic models shared by the storage layer,
the recommendation engine and the web application.
"""

from .task_models import (
    Subject,
    Task,
    TaskStatus,
)

from .recommendation_models import (
    LearningRecommendation,
    LearningResource,
    RecommendationType,
)

__all__ = [
    "Subject",
    "Task",
    "TaskStatus",
    "LearningRecommendation",
    "LearningResource",
    "RecommendationType",
]
