"""
Draft inputs for mutating operations.

Drafts carry no identity; the system turns them into entities
(or discards them) when the operation completes.
"""

from datetime import date

from pydantic import BaseModel, Field


class DraftUser(BaseModel):
    """Registration request for a new user."""

    name: str
    email: str
    password: str = Field(..., repr=False)
    image: str = Field(default="")
    background_image: str = Field(default="")


class DraftReview(BaseModel):
    """Review submission for a game."""

    game_id: str
    is_recommended: bool
    text: str = Field(default="")


class CardInfo(BaseModel):
    """Payment card details attached to a purchase."""

    card_holder_name: str
    number: int = Field(..., repr=False, exclude=True)
    expiration_date: date
    cvv: int = Field(..., repr=False, exclude=True)


class DraftPurchase(BaseModel):
    """Purchase request for a game."""

    game_id: str
    card: CardInfo
