"""Value object for partial article updates."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ArticleUpdateRequest:
    """Optional replacement values for an article's contents.

    Each field is independent; ``None`` means "leave the existing value unchanged".
    Built once per incoming update and consumed by ``Article.update_article``.
    """

    title_to_update: str | None = None
    description_to_update: str | None = None
    body_to_update: str | None = None

    def is_empty(self) -> bool:
        return (
            self.title_to_update is None
            and self.description_to_update is None
            and self.body_to_update is None
        )
