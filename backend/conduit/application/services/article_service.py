"""Application service (use case) for Article operations.

Each method is one unit of work: load the aggregate, run a domain
operation on it, store it, and hand back a view keyed by the acting user.
"""

import logging

from conduit.application.interfaces import ArticleRepository
from conduit.application.schemas import ArticleCreate, ArticleUpdate, CommentCreate
from conduit.config import Settings, get_settings
from conduit.domain.entities import Article, ArticleContents, ArticleView, Comment, User
from conduit.domain.exceptions import DuplicateEntityError, EntityNotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository, settings: Settings | None = None):
        self._repository = repository
        self._settings = settings or get_settings()

    async def _load(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def _ensure_title_available(self, author: User, title: str) -> None:
        if await self._repository.get_by_author_and_title(author.id, title) is not None:
            raise DuplicateEntityError("Article", "title", title)

    @staticmethod
    def _ensure_author(article: Article, user: User, action: str) -> None:
        if not article.is_written_by(user):
            logger.warning("User '%s' denied: %s (article id=%s)", user.username, action, article.id)
            raise PermissionDeniedError(action, user.username)

    async def get_article(self, article_id: int, viewer: User | None = None) -> ArticleView:
        article = await self._load(article_id)
        return article.view_for(viewer)

    async def list_articles(
        self,
        viewer: User | None = None,
        author: User | None = None,
        favorited_by: User | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[ArticleView]:
        page_size = min(limit or self._settings.default_page_size, self._settings.max_page_size)
        articles = await self._repository.get_all(
            skip=skip,
            limit=page_size,
            author_id=author.id if author else None,
            favorited_by_id=favorited_by.id if favorited_by else None,
        )
        return [article.view_for(viewer) for article in articles]

    async def create_article(self, author: User, data: ArticleCreate) -> ArticleView:
        await self._ensure_title_available(author, data.title)
        article = Article(
            author=author,
            contents=ArticleContents(title=data.title, description=data.description, body=data.body),
        )
        saved = await self._repository.create(article)
        logger.info("Article '%s' created by '%s' (id=%s)", saved.slug, author.username, saved.id)
        return saved.view_for(author)

    async def update_article(self, article_id: int, user: User, data: ArticleUpdate) -> ArticleView:
        article = await self._load(article_id)
        self._ensure_author(article, user, "update article")
        request = data.to_update_request()
        if request.is_empty():
            return article.view_for(user)
        if request.title_to_update is not None and request.title_to_update != article.title:
            await self._ensure_title_available(article.author, request.title_to_update)
        article.update_article(request)
        saved = await self._repository.update(article)
        return saved.view_for(user)

    async def delete_article(self, article_id: int, user: User) -> None:
        article = await self._load(article_id)
        self._ensure_author(article, user, "delete article")
        await self._repository.delete(article_id)
        logger.info("Article id=%s deleted by '%s'", article_id, user.username)

    async def favorite_article(self, article_id: int, user: User) -> ArticleView:
        article = await self._load(article_id)
        article.after_user_favorites_article(user)
        saved = await self._repository.update(article)
        return saved.view_for(user)

    async def unfavorite_article(self, article_id: int, user: User) -> ArticleView:
        article = await self._load(article_id)
        article.after_user_unfavorites_article(user)
        saved = await self._repository.update(article)
        return saved.view_for(user)

    async def add_comment(self, article_id: int, author: User, data: CommentCreate) -> Comment:
        article = await self._load(article_id)
        comment = article.add_comment(author, data.body)
        await self._repository.update(article)
        logger.info("Comment id=%s added to article id=%s by '%s'", comment.id, article_id, author.username)
        return comment

    async def get_comments(self, article_id: int) -> list[Comment]:
        article = await self._load(article_id)
        return sorted(article.comments, key=lambda comment: comment.id)

    async def delete_comment(self, article_id: int, user: User, comment_id: int) -> None:
        article = await self._load(article_id)
        try:
            article.remove_comment_by_user(user, comment_id)
        except PermissionDeniedError:
            logger.warning(
                "User '%s' denied: delete comment id=%s on article id=%s",
                user.username,
                comment_id,
                article_id,
            )
            raise
        await self._repository.update(article)
        logger.info("Comment id=%s removed from article id=%s", comment_id, article_id)
