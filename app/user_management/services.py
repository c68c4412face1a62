"""
User identification for JSON endpoints.

Callers are identified by the `uid` cookie; verifying who set it belongs to
the outer authentication layer.
"""
from typing import Optional
from flask import request, jsonify, make_response

from app.student_data import StudentDataError, validate_user_id

UID_COOKIE_MAX_AGE = 60 * 60 * 24 * 365 * 3  # 3 years


class UserService:
    """Service for resolving the current user from the session cookie."""

    def get_current_user_id(self) -> Optional[str]:
        """Get the current user ID from cookies."""
        uid = request.cookies.get("uid")
        return uid.strip() if uid else None

    def require_auth_json(self) -> tuple[Optional[str], Optional[dict]]:
        """Require a user id for JSON endpoints, return error if missing."""
        uid = self.get_current_user_id()
        if not uid:
            return None, {"error": "no-uid"}
        try:
            return validate_user_id(uid), None
        except StudentDataError:
            return None, {"error": "invalid-uid"}

    def create_user_session(self, uid: str):
        """Set the uid cookie for a valid user id."""
        try:
            uid = validate_user_id(uid)
        except StudentDataError as e:
            return jsonify({"error": str(e)}), 400

        resp = make_response(jsonify({"status": "ok", "uid": uid}))
        resp.set_cookie("uid", uid, max_age=UID_COOKIE_MAX_AGE)
        return resp

    def clear_user_session(self):
        """Drop the uid cookie."""
        resp = make_response(jsonify({"status": "ok"}))
        resp.delete_cookie("uid")
        return resp
