"""
User-side entities: users and the reviews they write.

Ownership, friendship and authorship are stored as ids and
resolved through the system registries.
"""

from pydantic import BaseModel, Field


class Review(BaseModel):
    """A review left by a user on a game they own."""

    id: str
    author_id: str = Field(..., description="Id of the user who wrote the review")
    game_id: str = Field(..., description="Id of the reviewed game")
    is_recommended: bool = Field(..., description="True if positive review")
    text: str = Field(default="", description="Review text content")


class User(BaseModel):
    """A registered storefront user."""

    id: str
    email: str
    password: str = Field(..., repr=False, exclude=True)
    name: str
    image: str = Field(default="")
    background_image: str = Field(default="")
    game_ids: list[str] = Field(default_factory=list, description="Owned games")
    friend_ids: list[str] = Field(default_factory=list, description="Symmetric friend edges")

    def owns(self, game_id: str) -> bool:
        """Check if the user owns the given game."""
        return game_id in self.game_ids

    def is_friend_of(self, user_id: str) -> bool:
        """Check if the given user is in this user's friend list."""
        return user_id in self.friend_ids
