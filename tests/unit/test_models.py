"""Tests for catalog data models."""

from datetime import date

import pytest
from pydantic import ValidationError

from steam_catalog.models import (
    CardInfo,
    ContentRating,
    Developer,
    Game,
    Image,
    PageInfo,
    Price,
    Review,
    Tag,
    User,
)


def make_game(**overrides: object) -> Game:
    fields: dict[str, object] = {
        "id": "g_0",
        "name": "g0",
        "main_image": Image(url="https://example.com/g0.jpg"),
        "developer": Developer(id="d_0", name="D0", image=Image(url="https://example.com/d0")),
        "price": Price(amount=20.2),
        "release_date": date(2020, 10, 10),
    }
    fields.update(overrides)
    return Game(**fields)


class TestContentRating:
    """Tests for ContentRating label mapping."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Mature", ContentRating.MATURE_17_PLUS),
            ("Everyone 10+", ContentRating.EVERYONE_10_PLUS),
            ("Teen", ContentRating.TEEN),
            ("Adults Only", ContentRating.ADULTS_ONLY),
            ("Everyone", ContentRating.EVERYONE),
            ("everyone", ContentRating.EVERYONE),
            ("Rating Pending", ContentRating.RATING_PENDING),
        ],
    )
    def test_known_labels(self, label: str, expected: ContentRating) -> None:
        """Test mapping of known labels."""
        assert ContentRating.from_label(label) is expected

    def test_unknown_label_is_pending(self) -> None:
        """Test fallback for unknown labels."""
        assert ContentRating.from_label("Unrated") is ContentRating.RATING_PENDING


class TestPrice:
    """Tests for Price."""

    def test_default_currency(self) -> None:
        """Test that currency defaults to USD."""
        assert Price(amount=9.99).currency == "USD"

    def test_negative_amount_rejected(self) -> None:
        """Test that negative prices are invalid."""
        with pytest.raises(ValidationError):
            Price(amount=-1)


class TestTagAndDeveloper:
    """Tests for immutable catalog references."""

    def test_tag_is_frozen(self) -> None:
        """Test that tags cannot be modified."""
        tag = Tag(id="t_0", name="RPG", image=Image(url="https://example.com/t0"))

        with pytest.raises(ValidationError):
            tag.name = "Action"

    def test_developer_is_hashable(self) -> None:
        """Test that developers can be used in sets."""
        developer = Developer(id="d_0", name="D0", image=Image(url="https://example.com/d0"))

        assert developer in {developer}


class TestGame:
    """Tests for Game."""

    def test_defaults(self) -> None:
        """Test creation with minimal required fields."""
        game = make_game()

        assert game.reviews == []
        assert game.tags == []
        assert game.related_game_ids == []
        assert game.esrb is ContentRating.RATING_PENDING
        assert game.requirement.memory == 0

    def test_recommended_count(self) -> None:
        """Test counting of recommended reviews."""
        game = make_game(
            reviews=[
                Review(id="r_0", author_id="u_0", game_id="g_0", is_recommended=True),
                Review(id="r_1", author_id="u_1", game_id="g_0", is_recommended=False),
                Review(id="r_2", author_id="u_2", game_id="g_0", is_recommended=True),
            ]
        )

        assert game.recommended_count == 2

    def test_tag_ids(self) -> None:
        """Test tag_ids helper property."""
        tags = [
            Tag(id="t_0", name="t0", image=Image(url="https://example.com/t0")),
            Tag(id="t_1", name="t1", image=Image(url="https://example.com/t1")),
        ]

        assert make_game(tags=tags).tag_ids == ["t_0", "t_1"]


class TestUser:
    """Tests for User."""

    def test_password_hidden_from_repr(self) -> None:
        """Test that the password does not appear in repr."""
        user = User(id="u_0", email="a@x.com", password="hunter2", name="a")

        assert "hunter2" not in repr(user)
        assert "password" not in user.model_dump()

    def test_owns_and_friends(self) -> None:
        """Test ownership and friendship helpers."""
        user = User(
            id="u_0",
            email="a@x.com",
            password="p",
            name="a",
            game_ids=["g_0"],
            friend_ids=["u_1"],
        )

        assert user.owns("g_0")
        assert not user.owns("g_1")
        assert user.is_friend_of("u_1")
        assert not user.is_friend_of("u_2")


class TestCardInfo:
    """Tests for CardInfo."""

    def test_sensitive_fields_hidden_from_repr(self) -> None:
        """Test that card number and cvv do not appear in repr."""
        card = CardInfo(
            card_holder_name="a",
            number=4111111111111111,
            expiration_date=date(2030, 1, 1),
            cvv=987,
        )

        assert "4111111111111111" not in repr(card)
        assert "987" not in repr(card)


class TestPageInfo:
    """Tests for PageInfo."""

    def test_has_next(self) -> None:
        """Test has_next helper property."""
        assert PageInfo[int](current_page=1, items=[1], amount_of_elements=11, amount_of_pages=2).has_next
        assert not PageInfo[int](
            current_page=2, items=[1], amount_of_elements=11, amount_of_pages=2
        ).has_next

    def test_current_page_must_be_positive(self) -> None:
        """Test page number validation."""
        with pytest.raises(ValidationError):
            PageInfo[int](current_page=0, items=[], amount_of_elements=0, amount_of_pages=0)
