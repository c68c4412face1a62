"""
Recommendation service for the web layer.
"""
from typing import Any, Dict, List, Optional

from learning_service.models import LearningRecommendation, RecommendationType
from learning_service.recommendations import RecommendationEngine

MAX_LIMIT = 50


class RecommendationService:
    """Thin adapter between HTTP requests and the recommendation engine."""

    def __init__(self, engine: RecommendationEngine):
        """
        Initialize RecommendationService.

        Args:
            engine: RecommendationEngine with a data source attached
        """
        self.engine = engine

    def get_recommendations(
        self,
        user_id: str,
        rec_type: Optional[RecommendationType] = None,
        limit: Optional[int] = None,
    ) -> List[LearningRecommendation]:
        """
        Generate recommendations for a user, optionally filtered and truncated.

        Storage errors propagate to the caller.
        """
        recommendations = self.engine.generate_recommendations(user_id)
        if rec_type is not None:
            recommendations = [rec for rec in recommendations if rec.type == rec_type]
        if limit is not None:
            recommendations = recommendations[:limit]
        return recommendations

    def get_recommendations_payload(self, user_id: str, **kwargs) -> Dict[str, Any]:
        """JSON-ready response body for the recommendations endpoint."""
        recommendations = self.get_recommendations(user_id, **kwargs)
        return {
            "recommendations": [rec.to_dict() for rec in recommendations],
            "count": len(recommendations),
        }

    @staticmethod
    def parse_type(raw: Optional[str]) -> Optional[RecommendationType]:
        """Parse the `type` query parameter; raises ValueError when unknown."""
        if not raw:
            return None
        return RecommendationType(raw.strip())

    @staticmethod
    def parse_limit(raw: Optional[str]) -> Optional[int]:
        """Parse the `limit` query parameter, clamped to 1..MAX_LIMIT."""
        if raw is None:
            return None
        try:
            limit = int(raw)
        except ValueError:
            return None
        return max(1, min(limit, MAX_LIMIT))
