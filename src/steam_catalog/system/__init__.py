"""
Storefront system.

The SteamSystem facade and the primitives it is built on:
id generation, pagination and the domain error taxonomy.
"""

from steam_catalog.system.errors import (
    AlreadyOwnedError,
    DeveloperNotFoundError,
    DuplicateEmailError,
    DuplicateReviewError,
    GameNotFoundError,
    InvalidPageError,
    NotFoundError,
    NotOwnedError,
    PageError,
    PurchaseError,
    ReviewError,
    SelfFriendError,
    SteamSystemError,
    TagNotFoundError,
    UserError,
    UserNotFoundError,
)
from steam_catalog.system.ids import EntityKind, IdGenerator
from steam_catalog.system.pagination import PAGE_SIZE, paginate
from steam_catalog.system.steam_system import SteamSystem

__all__ = [
    "PAGE_SIZE",
    "AlreadyOwnedError",
    "DeveloperNotFoundError",
    "DuplicateEmailError",
    "DuplicateReviewError",
    "EntityKind",
    "GameNotFoundError",
    "IdGenerator",
    "InvalidPageError",
    "NotFoundError",
    "NotOwnedError",
    "PageError",
    "PurchaseError",
    "ReviewError",
    "SelfFriendError",
    "SteamSystem",
    "SteamSystemError",
    "TagNotFoundError",
    "UserError",
    "UserNotFoundError",
    "paginate",
]
