"""User entity — the author / reader referenced by articles and comments."""

from dataclasses import dataclass


@dataclass(eq=False)
class User:
    """A registered user. Identified by its unique username."""

    username: str
    email: str
    bio: str | None = None
    image: str | None = None
    id: int | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.username == other.username

    def __hash__(self) -> int:
        return hash(self.username)
