"""
Catalog entities: games and the developers and tags that classify them.

Developers and tags are immutable once built. A game is immutable
except for its review list, which only grows.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from steam_catalog.models.users import Review


class Image(BaseModel):
    """Image reference."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Image URL")


class Price(BaseModel):
    """Price of a game."""

    currency: str = Field(default="USD", description="Currency code (e.g., USD, EUR)")
    amount: float = Field(..., ge=0, description="Price in currency units")


class Requirement(BaseModel):
    """System requirements. Every field is optional."""

    os: list[str] = Field(default_factory=list)
    processor: list[str] = Field(default_factory=list)
    memory: int = Field(default=0, ge=0, description="Memory in GB")
    graphics: list[str] = Field(default_factory=list)
    directx: str = Field(default="")
    storage: int = Field(default=0, ge=0, description="Storage in GB")


class ContentRating(str, Enum):
    """ESRB content rating."""

    EVERYONE = "everyone"
    EVERYONE_10_PLUS = "everyone10plus"
    TEEN = "teen"
    MATURE_17_PLUS = "mature17plus"
    ADULTS_ONLY = "adultsOnly"
    RATING_PENDING = "ratingPending"

    @classmethod
    def from_label(cls, label: str) -> "ContentRating":
        """Map a human-readable rating label to a rating (pending if unknown)."""
        return {
            "everyone": cls.EVERYONE,
            "everyone 10+": cls.EVERYONE_10_PLUS,
            "teen": cls.TEEN,
            "mature": cls.MATURE_17_PLUS,
            "adults only": cls.ADULTS_ONLY,
            "rating pending": cls.RATING_PENDING,
        }.get(label.strip().lower(), cls.RATING_PENDING)


class Developer(BaseModel):
    """Game developer."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    image: Image


class Tag(BaseModel):
    """Game tag (genre, feature, mood...)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    image: Image


class Game(BaseModel):
    """
    A game in the storefront catalog.

    Related games are stored by id so that the graph of games never
    holds reference cycles.
    """

    # Identifiers
    id: str
    name: str
    description: str = Field(default="")

    # Media
    main_image: Image
    multimedia: list[Image] = Field(default_factory=list)

    # Classification
    tags: list[Tag] = Field(default_factory=list)
    developer: Developer
    esrb: ContentRating = Field(default=ContentRating.RATING_PENDING)

    # Store data
    price: Price
    requirement: Requirement = Field(default_factory=Requirement)
    related_game_ids: list[str] = Field(default_factory=list)
    release_date: date
    website: str = Field(default="")

    # Reviews (owned, append-only)
    reviews: list[Review] = Field(default_factory=list)

    @property
    def tag_ids(self) -> list[str]:
        """Ids of the tags attached to this game."""
        return [t.id for t in self.tags]

    @property
    def recommended_count(self) -> int:
        """Number of reviews flagged as recommended."""
        return sum(1 for review in self.reviews if review.is_recommended)
