from .user import User
from .comment import Comment
from .article_update_request import ArticleUpdateRequest
from .article import Article, ArticleContents, ArticleView, slugify

__all__ = [
    "User",
    "Comment",
    "ArticleUpdateRequest",
    "Article",
    "ArticleContents",
    "ArticleView",
    "slugify",
]
