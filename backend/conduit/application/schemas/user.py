"""Pydantic DTOs for users and author profiles."""

from pydantic import BaseModel, Field

from conduit.domain.entities import User


class UserCreate(BaseModel):
    """Schema for registering a new user."""

    username: str = Field(..., min_length=1, max_length=64, examples=["jake"])
    email: str = Field(..., min_length=3, max_length=255, examples=["jake@jake.jake"])
    bio: str | None = None
    image: str | None = None

    def to_entity(self) -> User:
        return User(username=self.username, email=self.email, bio=self.bio, image=self.image)


class ProfileResponse(BaseModel):
    """Public view of an author."""

    username: str
    bio: str | None = None
    image: str | None = None

    model_config = {"from_attributes": True}
