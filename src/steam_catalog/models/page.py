"""Paginated result view."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageInfo(BaseModel, Generic[T]):
    """One page of an ordered result set, plus paging metadata."""

    current_page: int = Field(..., ge=1, description="Requested page (1-indexed)")
    items: list[T] = Field(default_factory=list, description="Items on this page")
    amount_of_elements: int = Field(..., ge=0, description="Total items across all pages")
    amount_of_pages: int = Field(..., ge=0, description="Total number of pages")

    @property
    def has_next(self) -> bool:
        """Check if there is a page after this one."""
        return self.current_page < self.amount_of_pages
