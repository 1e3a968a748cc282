"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from conduit.domain.entities import ArticleUpdateRequest, ArticleView, slugify

from .user import ProfileResponse


def _require_sluggable(title: str) -> str:
    if not slugify(title):
        raise ValueError("Title must contain at least one letter or digit")
    return title


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, max_length=255, examples=["How to train your dragon"])
    description: str = Field(..., min_length=1, examples=["Ever wonder how?"])
    body: str = Field(..., min_length=1, examples=["You have to believe"])

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _require_sluggable(v)


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    body: str | None = Field(None, min_length=1)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        return v if v is None else _require_sluggable(v)

    def to_update_request(self) -> ArticleUpdateRequest:
        return ArticleUpdateRequest(
            title_to_update=self.title,
            description_to_update=self.description,
            body_to_update=self.body,
        )


class ArticleResponse(BaseModel):
    """Schema returned to the client, as seen by one requesting user."""

    id: int
    slug: str
    title: str
    description: str
    body: str
    created_at: datetime
    updated_at: datetime
    favorited: bool
    favorites_count: int
    author: ProfileResponse

    @classmethod
    def from_view(cls, view: ArticleView) -> "ArticleResponse":
        article = view.article
        return cls(
            id=article.id,
            slug=article.slug,
            title=article.contents.title,
            description=article.contents.description,
            body=article.contents.body,
            created_at=article.created_at,
            updated_at=article.updated_at,
            favorited=view.favorited,
            favorites_count=view.favorites_count,
            author=ProfileResponse.model_validate(article.author, from_attributes=True),
        )
