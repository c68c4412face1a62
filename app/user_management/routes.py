"""
User management routes for session identification.
"""
from flask import Blueprint, request
from .services import UserService


def create_user_routes(user_service: UserService) -> Blueprint:
    """Create user management routes."""
    bp = Blueprint('user_management', __name__)

    @bp.route("/set_user", methods=["POST"])
    def set_user():
        """Set user ID and create session."""
        payload = request.get_json(silent=True) or {}
        uid = (request.form.get("uid") or payload.get("uid") or "").strip()
        return user_service.create_user_session(uid)

    @bp.route("/logout", methods=["POST"])
    def logout():
        """Clear the user session."""
        return user_service.clear_user_session()

    return bp
