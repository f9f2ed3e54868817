"""Tests for pagination."""

import pytest

from steam_catalog.system import PAGE_SIZE, InvalidPageError, PageError, paginate


class TestPaginate:
    """Tests for the paginate helper."""

    @pytest.mark.parametrize("page", [0, -1, -100])
    def test_page_below_one_fails(self, page: int) -> None:
        """Test that pages below 1 are rejected."""
        with pytest.raises(InvalidPageError):
            paginate(list(range(5)), page)

    def test_invalid_page_is_page_error(self) -> None:
        """Test error hierarchy for invalid pages."""
        with pytest.raises(PageError, match="Page must be 1 or more"):
            paginate([], 0)

    def test_first_page(self) -> None:
        """Test first page of a multi-page sequence."""
        result = paginate(list(range(25)), 1)

        assert result.current_page == 1
        assert result.items == list(range(10))
        assert result.amount_of_elements == 25
        assert result.amount_of_pages == 3

    def test_last_page_is_partial(self) -> None:
        """Test that the last chunk keeps the remainder."""
        result = paginate(list(range(25)), 3)

        assert result.items == [20, 21, 22, 23, 24]
        assert result.has_next is False

    def test_page_past_end_is_empty(self) -> None:
        """Test that an out-of-range page returns no items instead of failing."""
        result = paginate(list(range(80)), 9)

        assert result.current_page == 9
        assert result.items == []
        assert result.amount_of_elements == 80
        assert result.amount_of_pages == 8

    def test_empty_sequence(self) -> None:
        """Test pagination of an empty sequence."""
        result = paginate([], 1)

        assert result.items == []
        assert result.amount_of_elements == 0
        assert result.amount_of_pages == 0

    @pytest.mark.parametrize("length", [1, 9, 10, 11, 20, 99, 101])
    def test_pages_cover_all_items(self, length: int) -> None:
        """Test page count and that all pages together hold every item once."""
        items = list(range(length))
        first = paginate(items, 1)

        collected = []
        for page in range(1, first.amount_of_pages + 1):
            collected.extend(paginate(items, page).items)

        assert first.amount_of_pages == -(-length // PAGE_SIZE)
        assert collected == items

    def test_custom_page_size(self) -> None:
        """Test pagination with a non-default page size."""
        result = paginate("abcdefg", 2, page_size=3)

        assert result.items == ["d", "e", "f"]
        assert result.amount_of_pages == 3

    def test_input_is_not_modified(self) -> None:
        """Test that pagination has no side effects on its input."""
        items = [3, 1, 2]
        paginate(items, 1)

        assert items == [3, 1, 2]
