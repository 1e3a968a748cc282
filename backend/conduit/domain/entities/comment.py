from dataclasses import dataclass, field
from datetime import datetime, timezone

from .user import User


@dataclass(eq=False)
class Comment:
    """A comment owned by exactly one article.

    Compared by identity: two unsaved comments with the same body are distinct.
    """

    author: User
    body: str
    article_id: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def is_written_by(self, user: User) -> bool:
        return self.author == user
