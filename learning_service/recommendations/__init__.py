"""
Recommendation engine package for personalized learning suggestions.

Provides a rule-based engine that can be reused by the web layer or the
maintenance CLI without creating Flask dependencies.
"""

from .engine import (
    RecommendationContext,
    RecommendationEngine,
    RecommendationStrategy,
    StudentDataSource,
    build_default_engine,
)
from .strategies import (
    BALANCE_CATEGORIES,
    BalanceStrategy,
    ChallengeStrategy,
    SkillDevelopmentStrategy,
    SubjectExplorationStrategy,
)
from .content import (
    DEFAULT_SUBJECTS,
    SUBJECT_CATEGORIES,
    get_challenge_recommendation_text,
    get_skill_recommendation_text,
    get_subject_recommendation_text,
    get_subject_resources,
)

__all__ = [
    "RecommendationContext",
    "RecommendationEngine",
    "RecommendationStrategy",
    "StudentDataSource",
    "build_default_engine",
    "BALANCE_CATEGORIES",
    "BalanceStrategy",
    "ChallengeStrategy",
    "SkillDevelopmentStrategy",
    "SubjectExplorationStrategy",
    "DEFAULT_SUBJECTS",
    "SUBJECT_CATEGORIES",
    "get_challenge_recommendation_text",
    "get_skill_recommendation_text",
    "get_subject_recommendation_text",
    "get_subject_resources",
]
