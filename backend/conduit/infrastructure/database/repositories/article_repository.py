"""Concrete article repository backed by SQLAlchemy.

The aggregate is stored across three tables: the article row (with its
embedded contents), the ``article_favorites`` join table and ``comments``.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.application.interfaces import ArticleRepository
from conduit.domain.entities import Article, ArticleContents, Comment, User
from conduit.domain.exceptions import EntityNotFoundError
from conduit.infrastructure.database.models import ArticleModel, CommentModel, UserModel

from .user_repository import user_to_entity


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain aggregate."""
        return Article(
            id=model.id,
            author=user_to_entity(model.author),
            contents=ArticleContents(
                title=model.title,
                description=model.description,
                body=model.body,
            ),
            created_at=model.created_at,
            updated_at=model.updated_at,
            favorited_by={user_to_entity(user) for user in model.favorited_by},
            comments={self._comment_to_entity(comment) for comment in model.comments},
        )

    @staticmethod
    def _comment_to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            article_id=model.article_id,
            author=user_to_entity(model.author),
            body=model.body,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def _user_model(self, user: User) -> UserModel:
        if user.id is None:
            raise ValueError(f"User '{user.username}' must be saved before it is referenced")
        model = await self._session.get(UserModel, user.id)
        if model is None:
            raise EntityNotFoundError("User", user.id)
        return model

    async def _sync_children(self, model: ArticleModel, article: Article) -> list[tuple[Comment, CommentModel]]:
        """Copy favorites and comments from the aggregate onto the ORM model.

        Returns the comments that were added, paired with their new rows, so
        generated IDs can be written back after the flush.
        """
        model.favorited_by = {await self._user_model(user) for user in article.favorited_by}

        kept_ids = {comment.id for comment in article.comments if comment.id is not None}
        added = [
            (comment, CommentModel(author=await self._user_model(comment.author), body=comment.body))
            for comment in article.comments
            if comment.id is None
        ]
        model.comments = [row for row in model.comments if row.id in kept_ids] + [row for _, row in added]
        return added

    @staticmethod
    def _write_back(added: list[tuple[Comment, CommentModel]]) -> None:
        for comment, row in added:
            comment.id = row.id
            comment.article_id = row.article_id
            comment.created_at = row.created_at
            comment.updated_at = row.updated_at

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_by_author_and_title(self, author_id: int, title: str) -> Article | None:
        stmt = select(ArticleModel).where(
            ArticleModel.author_id == author_id,
            ArticleModel.title == title,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 20,
        author_id: int | None = None,
        favorited_by_id: int | None = None,
    ) -> list[Article]:
        stmt = select(ArticleModel)
        if author_id is not None:
            stmt = stmt.where(ArticleModel.author_id == author_id)
        if favorited_by_id is not None:
            stmt = stmt.where(ArticleModel.favorited_by.any(UserModel.id == favorited_by_id))
        stmt = (
            stmt.order_by(ArticleModel.created_at.desc(), ArticleModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = ArticleModel(
            author=await self._user_model(article.author),
            slug=article.slug,
            title=article.contents.title,
            description=article.contents.description,
            body=article.contents.body,
            comments=[],
        )
        added = await self._sync_children(model, article)
        self._session.add(model)
        await self._session.flush()
        self._write_back(added)
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id) if article.id is not None else None
        if model is None:
            raise EntityNotFoundError("Article", article.id or "<unsaved>")
        model.slug = article.slug
        model.title = article.contents.title
        model.description = article.contents.description
        model.body = article.contents.body
        added = await self._sync_children(model, article)
        await self._session.flush()
        self._write_back(added)
        return self._to_entity(model)

    async def delete(self, article_id: int) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
