from .user import UserCreate, ProfileResponse
from .article import ArticleCreate, ArticleUpdate, ArticleResponse
from .comment import CommentCreate, CommentResponse

__all__ = [
    "UserCreate",
    "ProfileResponse",
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "CommentCreate",
    "CommentResponse",
]
