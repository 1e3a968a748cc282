from .base import Base
from .session import engine, async_session_factory, session_scope, init_database
from .models import ArticleModel, CommentModel, UserModel, article_favorites

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "session_scope",
    "init_database",
    "ArticleModel",
    "CommentModel",
    "UserModel",
    "article_favorites",
]
