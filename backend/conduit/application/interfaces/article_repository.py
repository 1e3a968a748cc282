"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from conduit.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Every method works on the whole aggregate: comments and favorites are
    loaded and stored together with their article.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_by_author_and_title(self, author_id: int, title: str) -> Article | None:
        """Retrieve the article matching the natural key, if any."""
        ...

    @abstractmethod
    async def get_all(
        self,
        skip: int = 0,
        limit: int = 20,
        author_id: int | None = None,
        favorited_by_id: int | None = None,
    ) -> list[Article]:
        """Retrieve a page of articles, newest first, optionally filtered."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Store contents, favorites and comments of an existing article."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article with its comments. Returns False if not found."""
        ...
