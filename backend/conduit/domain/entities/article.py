"""Article aggregate — contents, authorship, comments and favorites.

The aggregate is loaded by a repository, mutated by exactly one unit of work
and persisted again. Nothing here is thread-safe; callers serialize access
per instance and rely on the database transaction for concurrent writers.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from conduit.domain.exceptions import EntityNotFoundError, PermissionDeniedError

from .article_update_request import ArticleUpdateRequest
from .comment import Comment
from .user import User

_SLUG_SEPARATORS = re.compile(r"[\W_]+")


def slugify(title: str) -> str:
    """Turn a title into a URL-friendly slug: ``"Hello, World!"`` -> ``"hello-world"``."""
    return _SLUG_SEPARATORS.sub("-", title.lower()).strip("-")


@dataclass
class ArticleContents:
    """Title, description and body, owned exclusively by one article."""

    title: str
    description: str
    body: str

    @property
    def slug(self) -> str:
        return slugify(self.title)

    def update_contents_if_present(self, request: ArticleUpdateRequest) -> None:
        """Replace only the fields present in the request."""
        if request.title_to_update is not None:
            self.title = request.title_to_update
        if request.description_to_update is not None:
            self.description = request.description_to_update
        if request.body_to_update is not None:
            self.body = request.body_to_update


@dataclass(frozen=True)
class ArticleView:
    """Per-user projection of an article.

    Carries the ``favorited`` flag computed for one requesting user, so the
    shared aggregate does not have to hold view state.
    """

    article: "Article"
    favorited: bool

    @property
    def favorites_count(self) -> int:
        return self.article.favorited_count


@dataclass(eq=False)
class Article:
    """Aggregate root for a blog article.

    Equality is defined over the natural key ``(author, title)``: two
    instances written by the same author with the same title are equal,
    whatever their comments, favorites or timestamps.
    """

    author: User
    contents: ArticleContents
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    favorited_by: set[User] = field(default_factory=set)
    comments: set[Comment] = field(default_factory=set)
    # Transient; never persisted.
    favorited: bool = False

    # ── Favorites ───────────────────────────────────────────────────

    def after_user_favorites_article(self, user: User) -> "Article":
        self.favorited_by.add(user)
        return self.update_favorite_by_user(user)

    def after_user_unfavorites_article(self, user: User) -> "Article":
        self.favorited_by.discard(user)
        return self.update_favorite_by_user(user)

    def update_favorite_by_user(self, user: User) -> "Article":
        """Recompute ``favorited`` for the given user."""
        self.favorited = user in self.favorited_by
        return self

    def view_for(self, user: User | None) -> ArticleView:
        """Build the projection seen by ``user`` (``None`` for anonymous readers)."""
        return ArticleView(
            article=self,
            favorited=user is not None and user in self.favorited_by,
        )

    # ── Comments ────────────────────────────────────────────────────

    def add_comment(self, author: User, body: str) -> Comment:
        comment = Comment(author=author, body=body, article_id=self.id)
        self.comments.add(comment)
        return comment

    def remove_comment_by_user(self, user: User, comment_id: int | None) -> None:
        """Remove a comment on behalf of ``user``.

        Allowed for the article's author and for the comment's author.

        Raises:
            EntityNotFoundError: no comment of this article has ``comment_id``.
            PermissionDeniedError: ``user`` wrote neither the article nor the comment.
        """
        comment = self.find_comment(comment_id)
        if user != self.author and not comment.is_written_by(user):
            raise PermissionDeniedError("delete comment", user.username)
        self.comments.discard(comment)

    def find_comment(self, comment_id: int | None) -> Comment:
        """Look up a saved comment. Unsaved comments (``id`` is None) never match."""
        if comment_id is not None:
            for comment in self.comments:
                if comment.id is not None and comment.id == comment_id:
                    return comment
        raise EntityNotFoundError("Comment", comment_id if comment_id is not None else "<unsaved>")

    # ── Contents ────────────────────────────────────────────────────

    def update_article(self, request: ArticleUpdateRequest) -> None:
        self.contents.update_contents_if_present(request)
        self.updated_at = datetime.now(timezone.utc)

    def is_written_by(self, user: User) -> bool:
        return self.author == user

    @property
    def title(self) -> str:
        return self.contents.title

    @property
    def slug(self) -> str:
        return self.contents.slug

    @property
    def favorited_count(self) -> int:
        return len(self.favorited_by)

    @property
    def is_favorited(self) -> bool:
        return self.favorited

    @property
    def natural_key(self) -> tuple[User, str]:
        return (self.author, self.contents.title)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Article):
            return NotImplemented
        return self.natural_key == other.natural_key

    def __hash__(self) -> int:
        return hash(self.natural_key)
