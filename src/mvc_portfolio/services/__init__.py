from mvc_portfolio.services.post_service import PostService
from mvc_portfolio.services.user_service import UserService

__all__ = ["PostService", "UserService"]
