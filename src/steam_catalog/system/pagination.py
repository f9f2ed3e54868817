"""Fixed-size pagination over ordered sequences."""

import math
from collections.abc import Sequence
from typing import TypeVar

from steam_catalog.models.page import PageInfo
from steam_catalog.system.errors import InvalidPageError

T = TypeVar("T")

PAGE_SIZE = 10


def paginate(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> PageInfo[T]:
    """
    Return one page of ``items``.

    Pages are 1-indexed consecutive chunks of ``page_size`` items in input
    order; the last one may be shorter. A page past the end is empty
    rather than an error.

    Args:
        items: Ordered sequence to paginate
        page: Page number, starting at 1
        page_size: Items per page

    Returns:
        PageInfo with the requested chunk and totals

    Raises:
        InvalidPageError: If page is less than 1
    """
    if page < 1:
        raise InvalidPageError(page=str(page))

    start = (page - 1) * page_size
    return PageInfo(
        current_page=page,
        items=list(items[start : start + page_size]),
        amount_of_elements=len(items),
        amount_of_pages=math.ceil(len(items) / page_size),
    )
