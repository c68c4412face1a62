"""
Recommendation routes for API endpoints.
"""
import logging

from flask import Blueprint, jsonify, request

from app.student_data import StudentDataError
from app.user_management.services import UserService
from learning_service.models import RecommendationType
from .services import RecommendationService

logger = logging.getLogger(__name__)


def create_recommendation_routes(
    recommendation_service: RecommendationService,
    user_service: UserService,
) -> Blueprint:
    """Create recommendation routes blueprint."""
    bp = Blueprint('recommendations', __name__, url_prefix='/api/recommendations')

    @bp.route('', methods=['GET'])
    @bp.route('/', methods=['GET'])
    def get_recommendations():
        """
        Get learning recommendations for the current user.

        Query parameters:
            - type: Only return one recommendation type
            - limit: Maximum recommendations to return (max 50)
        """
        uid, error = user_service.require_auth_json()
        if error:
            return jsonify(error), 400

        try:
            rec_type = recommendation_service.parse_type(request.args.get('type'))
        except ValueError:
            return jsonify({"error": f"Unknown recommendation type: {request.args.get('type')}"}), 400
        limit = recommendation_service.parse_limit(request.args.get('limit'))

        try:
            payload = recommendation_service.get_recommendations_payload(
                uid, rec_type=rec_type, limit=limit
            )
        except StudentDataError as e:
            logger.error("Failed to generate recommendations for %s: %s", uid, e)
            return jsonify({"error": "Failed to load student data"}), 500

        return jsonify(payload)

    @bp.route('/types', methods=['GET'])
    def get_recommendation_types():
        """List the recommendation type tags."""
        return jsonify({"types": [rec_type.value for rec_type in RecommendationType]})

    return bp
