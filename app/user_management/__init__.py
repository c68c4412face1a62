"""
User management module: identifies the caller from the uid cookie.
"""

from .services import UserService
from .routes import create_user_routes
from .factory import create_user_management_module

__all__ = ["UserService", "create_user_routes", "create_user_management_module"]
