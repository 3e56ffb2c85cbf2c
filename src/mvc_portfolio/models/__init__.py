from mvc_portfolio.models.base import Base
from mvc_portfolio.models.post import PostModel
from mvc_portfolio.models.user import UserModel

__all__ = ["Base", "PostModel", "UserModel"]
