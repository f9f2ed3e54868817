"""
Steam Catalog.

In-memory digital storefront: games, developers, tags, users,
reviews, ownership and friendships behind a single system facade.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
