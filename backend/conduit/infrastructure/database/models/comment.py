"""SQLAlchemy ORM model for comments, owned by an article."""

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from conduit.infrastructure.database.base import Base

from .user import UserModel

if TYPE_CHECKING:
    from .article import ArticleModel


class CommentModel(Base):
    """ORM model — maps to the 'comments' table."""

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    article_id: Mapped[int] = mapped_column(
        ForeignKey("articles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    article: Mapped["ArticleModel"] = relationship(back_populates="comments")
    author: Mapped[UserModel] = relationship(lazy="joined")

    def __repr__(self) -> str:
        return f"<CommentModel(id={self.id}, article_id={self.article_id})>"
