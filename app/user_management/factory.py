"""
Factory for creating user management module.
"""
from .services import UserService
from .routes import create_user_routes


def create_user_management_module() -> dict:
    """Create user management module with service and routes.

    Returns:
        Dictionary containing the service and blueprint
    """
    user_service = UserService()
    blueprint = create_user_routes(user_service)

    return {
        "service": user_service,
        "blueprint": blueprint
    }
