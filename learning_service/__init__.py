# Learning service package for student progress and recommendations

from .models import (
    LearningRecommendation,
    LearningResource,
    RecommendationType,
    Subject,
    Task,
    TaskStatus,
)
from .recommendations import (
    RecommendationContext,
    RecommendationEngine,
    build_default_engine,
)
from .logging_config import (
    setup_logging,
    stop_logging,
    get_logger,
    ThreadSafeLoggingConfig,
)

__all__ = [
    "LearningRecommendation",
    "LearningResource",
    "RecommendationType",
    "Subject",
    "Task",
    "TaskStatus",
    "RecommendationContext",
    "RecommendationEngine",
    "build_default_engine",
    "setup_logging",
    "stop_logging",
    "get_logger",
    "ThreadSafeLoggingConfig",
]
