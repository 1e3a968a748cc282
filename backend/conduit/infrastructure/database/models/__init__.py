from .user import UserModel
from .article import ArticleModel, article_favorites
from .comment import CommentModel

__all__ = [
    "UserModel",
    "ArticleModel",
    "article_favorites",
    "CommentModel",
]
