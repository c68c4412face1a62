"""
Reusable learning recommendation engine primitives.

This module lives inside learning_service/ so it can be shared by the web
application and the maintenance CLI without introducing Flask dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from ..models import LearningRecommendation, Subject, Task

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Core data structures
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class RecommendationContext:
    """Context block passed to recommendation strategies."""

    completed_tasks: Sequence[Task]
    subjects: Sequence[Subject] = field(default_factory=list)


class StudentDataSource(Protocol):
    """Read-only storage collaborator the engine loads student data from."""

    def get_completed_tasks(self, user_id: str) -> List[Task]:
        """Return the user's tasks whose status is completed."""

    def get_subjects(self, user_id: str) -> List[Subject]:
        """Return the user's subject list."""


class RecommendationStrategy(Protocol):
    """Interface for plug-and-play recommendation rules."""

    name: str

    def generate(self, context: RecommendationContext) -> List[LearningRecommendation]:
        """Return zero or more recommendations for the context."""


class RecommendationEngine:
    """Runs every strategy and returns recommendations ordered by priority."""

    def __init__(
        self,
        strategies: Sequence[RecommendationStrategy],
        data_source: Optional[StudentDataSource] = None,
    ):
        if not strategies:
            raise ValueError("At least one recommendation strategy is required.")
        self.strategies = list(strategies)
        self.data_source = data_source

    def recommend(self, context: RecommendationContext) -> List[LearningRecommendation]:
        """Evaluate all strategies over an already-loaded context."""
        recommendations: List[LearningRecommendation] = []
        for strategy in self.strategies:
            produced = strategy.generate(context)
            logger.debug("Strategy %s produced %d recommendation(s)", strategy.name, len(produced))
            recommendations.extend(produced)

        # sorted() is stable: equal priorities keep strategy order
        return sorted(recommendations, key=lambda rec: rec.priority, reverse=True)

    def generate_recommendations(self, user_id: str) -> List[LearningRecommendation]:
        """Load a user's completed tasks and subjects, then recommend.

        Storage errors are not caught here; the caller decides how to report them.
        """
        if self.data_source is None:
            raise RuntimeError("RecommendationEngine has no data source configured.")

        completed_tasks = self.data_source.get_completed_tasks(user_id)
        subjects = self.data_source.get_subjects(user_id)

        recommendations = self.recommend(
            RecommendationContext(completed_tasks=completed_tasks, subjects=subjects)
        )
        logger.debug(
            "Generated %d recommendation(s) for user %s from %d completed task(s)",
            len(recommendations),
            user_id,
            len(completed_tasks),
        )
        return recommendations


def build_default_engine(
    data_source: Optional[StudentDataSource] = None,
    underexplored_threshold: int = 2,
    consistent_interest_threshold: int = 3,
    balance_min_tasks: int = 5,
    challenge_min_tasks: int = 10,
) -> RecommendationEngine:
    """Factory for the default engine: exploration, skills, balance, challenge."""
    from .strategies import (
        BalanceStrategy,
        ChallengeStrategy,
        SkillDevelopmentStrategy,
        SubjectExplorationStrategy,
    )

    return RecommendationEngine(
        strategies=[
            SubjectExplorationStrategy(underexplored_threshold=underexplored_threshold),
            SkillDevelopmentStrategy(min_tasks=consistent_interest_threshold),
            BalanceStrategy(min_tasks=balance_min_tasks),
            ChallengeStrategy(min_tasks=challenge_min_tasks),
        ],
        data_source=data_source,
    )
