"""
Recommendation-related data models.

Recommendations are transient view models: they are recomputed on every
request and never persisted. Field aliases follow the camelCase contract the
dashboard client already consumes.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class RecommendationType(str, Enum):
    """Category tags for learning recommendations."""
    SUBJECT_EXPLORATION = "subject_exploration"
    SKILL_DEVELOPMENT = "skill_development"
    KNOWLEDGE_BUILDING = "knowledge_building"
    BALANCE = "balance"
    CHALLENGE = "challenge"


class LearningResource(BaseModel):
    """External learning resource link."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Resource title")
    url: str = Field(description="Resource URL")
    description: str = Field(description="One-line resource description")


class LearningRecommendation(BaseModel):
    """A single learning recommendation produced by the engine."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(description="Slug derived from type and subject")
    type: RecommendationType = Field(description="Recommendation category")
    title: str = Field(description="Short headline")
    description: str = Field(description="What the student could do")
    reason: str = Field(description="Why this is recommended")
    suggested_task: Optional[str] = Field(default=None, alias="suggestedTask", description="Concrete task idea")
    related_subject: Optional[str] = Field(default=None, alias="relatedSubject", description="Subject this relates to")
    priority: int = Field(ge=1, le=10, description="1-10, higher sorts first")
    resources: Optional[List[LearningResource]] = Field(default=None, description="Curated resource links")

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary using the client field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
