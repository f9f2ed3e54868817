"""
Domain errors raised by the storefront system.

Every error carries a stable ``code`` so callers can branch on the
kind of failure without matching on messages.
"""


class SteamSystemError(Exception):
    """Base exception for storefront business-rule violations."""

    code: str = "steam_system_error"
    default_message: str = "Storefront operation failed"

    def __init__(self, message: str | None = None, **context: str) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.context = context


# Lookups


class NotFoundError(SteamSystemError):
    """Raised when a referenced id has no matching entity."""

    code = "not_found"
    default_message = "Entity not found"


class UserNotFoundError(NotFoundError):
    code = "not_found_user"
    default_message = "User not found"


class GameNotFoundError(NotFoundError):
    code = "not_found_game"
    default_message = "Game not found"


class DeveloperNotFoundError(NotFoundError):
    code = "not_found_developer"
    default_message = "Developer not found"


class TagNotFoundError(NotFoundError):
    code = "not_found_tag"
    default_message = "Tag not found"


# Users


class UserError(SteamSystemError):
    """Raised when a user operation is rejected."""

    code = "user_error"


class DuplicateEmailError(UserError):
    code = "duplicate_email"
    default_message = "Email is already taken"


class SelfFriendError(UserError):
    code = "self_friend"
    default_message = "A user cannot add themselves as a friend"


# Reviews


class ReviewError(SteamSystemError):
    """Raised when a review submission is rejected."""

    code = "review_error"


class NotOwnedError(ReviewError):
    code = "not_owned"
    default_message = "You need to own the game to leave a review"


class DuplicateReviewError(ReviewError):
    code = "duplicate_review"
    default_message = "You've already submitted a review for this game"


# Purchases


class PurchaseError(SteamSystemError):
    """Raised when a purchase is rejected."""

    code = "purchase_error"


class AlreadyOwnedError(PurchaseError):
    code = "already_owned"
    default_message = "You already have the game"


# Pagination


class PageError(SteamSystemError):
    """Raised when a page request is invalid."""

    code = "page_error"


class InvalidPageError(PageError):
    code = "invalid_page"
    default_message = "Page must be 1 or more"
