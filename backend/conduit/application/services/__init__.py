from .article_service import ArticleService
from .user_service import UserService

__all__ = [
    "ArticleService",
    "UserService",
]
