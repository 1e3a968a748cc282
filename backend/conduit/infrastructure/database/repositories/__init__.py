from .article_repository import SQLAlchemyArticleRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyUserRepository",
]
