"""
Data models for the storefront catalog.

Pydantic models for catalog entities, users, drafts and pages.
"""

from steam_catalog.models.catalog import (
    ContentRating,
    Developer,
    Game,
    Image,
    Price,
    Requirement,
    Tag,
)
from steam_catalog.models.drafts import CardInfo, DraftPurchase, DraftReview, DraftUser
from steam_catalog.models.page import PageInfo
from steam_catalog.models.users import Review, User

__all__ = [
    "CardInfo",
    "ContentRating",
    "Developer",
    "DraftPurchase",
    "DraftReview",
    "DraftUser",
    "Game",
    "Image",
    "PageInfo",
    "Price",
    "Requirement",
    "Review",
    "Tag",
    "User",
]
