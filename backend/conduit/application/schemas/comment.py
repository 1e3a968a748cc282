from datetime import datetime

from pydantic import BaseModel, Field

from conduit.domain.entities import Comment

from .user import ProfileResponse


class CommentCreate(BaseModel):
    """Schema for adding a comment to an article."""

    body: str = Field(..., min_length=1, examples=["It takes a Jacobian"])


class CommentResponse(BaseModel):
    id: int
    body: str
    created_at: datetime
    updated_at: datetime
    author: ProfileResponse

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            body=comment.body,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            author=ProfileResponse.model_validate(comment.author, from_attributes=True),
        )
