"""
Factory for creating the recommendations module.
"""

from learning_service.recommendations import build_default_engine
from .services import RecommendationService
from .routes import create_recommendation_routes


def create_recommendations_module(
    student_store,
    user_service,
    recommendation_config=None,
) -> dict:
    """
    Create the recommendations module with all its components.

    Args:
        student_store: StudentDataStore the engine reads from
        user_service: UserService resolving the current user
        recommendation_config: Optional RecommendationConfig with rule thresholds

    Returns:
        Dictionary containing:
            - engine: RecommendationEngine instance
            - service: RecommendationService instance
            - blueprint: Flask blueprint for routes
    """
    engine_kwargs = recommendation_config.engine_kwargs() if recommendation_config else {}
    engine = build_default_engine(data_source=student_store, **engine_kwargs)
    service = RecommendationService(engine)
    blueprint = create_recommendation_routes(service, user_service)

    return {
        "engine": engine,
        "service": service,
        "blueprint": blueprint
    }
