"""
Storefront system facade.

Single entry point for every lookup, search and mutation over the
in-memory catalog. Referenced ids are resolved first, business rules
are checked next, and collections are mutated only once every check
has passed.
"""

from collections.abc import Iterable
from typing import TypeVar

from steam_catalog.config import CatalogConfig, get_settings
from steam_catalog.logger import get_logger
from steam_catalog.models import (
    Developer,
    DraftPurchase,
    DraftReview,
    DraftUser,
    Game,
    PageInfo,
    Review,
    Tag,
    User,
)
from steam_catalog.system.errors import (
    AlreadyOwnedError,
    DeveloperNotFoundError,
    DuplicateEmailError,
    DuplicateReviewError,
    GameNotFoundError,
    NotOwnedError,
    SelfFriendError,
    TagNotFoundError,
    UserNotFoundError,
)
from steam_catalog.system.ids import IdGenerator
from steam_catalog.system.pagination import paginate

E = TypeVar("E", Game, Developer, Tag)


def _index(entities: Iterable[E], kind: str) -> dict[str, E]:
    """Build an insertion-ordered id registry, rejecting duplicate ids."""
    registry: dict[str, E] = {}
    for entity in entities:
        if entity.id in registry:
            raise ValueError(f"Duplicate {kind} id: {entity.id}")
        registry[entity.id] = entity
    return registry


class SteamSystem:
    """
    In-memory storefront catalog.

    Games, developers and tags are supplied at construction and never
    change afterwards, except for each game's review list. The user
    registry starts empty; users are registered only through
    :meth:`add_new_user`, so every user id comes from this system's
    generator.

    The system is not thread-safe: a concurrent host must serialize
    every call on an instance.
    """

    def __init__(
        self,
        games: Iterable[Game],
        developers: Iterable[Developer],
        tags: Iterable[Tag],
        *,
        config: CatalogConfig | None = None,
    ) -> None:
        """
        Initialize the system.

        Args:
            games: Catalog games, in catalog order
            developers: Known developers
            tags: Known tags
            config: Catalog configuration (uses settings if None)

        Raises:
            ValueError: If any collection contains a repeated id
        """
        self._config = config or get_settings().catalog
        self._games = _index(games, "game")
        self._developers = _index(developers, "developer")
        self._tags = _index(tags, "tag")
        self._users: dict[str, User] = {}
        self._id_generator = IdGenerator()
        self._logger = get_logger(__name__, component="steam_system")

    # ------------------------------------------------------------------
    # Registries
    # ------------------------------------------------------------------

    @property
    def games(self) -> list[Game]:
        return list(self._games.values())

    @property
    def developers(self) -> list[Developer]:
        return list(self._developers.values())

    @property
    def tags(self) -> list[Tag]:
        return list(self._tags.values())

    @property
    def users(self) -> list[User]:
        return list(self._users.values())

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_user(self, user_id: str) -> User:
        """Get a user by id, or raise UserNotFoundError."""
        try:
            return self._users[user_id]
        except KeyError:
            raise UserNotFoundError(user_id=user_id) from None

    def get_game(self, game_id: str) -> Game:
        """Get a game by id, or raise GameNotFoundError."""
        try:
            return self._games[game_id]
        except KeyError:
            raise GameNotFoundError(game_id=game_id) from None

    def get_developer(self, developer_id: str) -> Developer:
        """Get a developer by id, or raise DeveloperNotFoundError."""
        try:
            return self._developers[developer_id]
        except KeyError:
            raise DeveloperNotFoundError(developer_id=developer_id) from None

    def get_tag(self, tag_id: str) -> Tag:
        """Get a tag by id, or raise TagNotFoundError."""
        try:
            return self._tags[tag_id]
        except KeyError:
            raise TagNotFoundError(tag_id=tag_id) from None

    def get_user_games(self, user_id: str) -> list[Game]:
        """Resolve the games owned by a user, in purchase order."""
        user = self.get_user(user_id)
        return [self._games[game_id] for game_id in user.game_ids]

    def get_user_friends(self, user_id: str) -> list[User]:
        """Resolve the friends of a user, in the order they were added."""
        user = self.get_user(user_id)
        return [self._users[friend_id] for friend_id in user.friend_ids]

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def add_new_user(self, draft: DraftUser) -> User:
        """
        Register a new user.

        Args:
            draft: Registration data

        Returns:
            The created user, with no games and no friends

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        if any(user.email == draft.email for user in self._users.values()):
            self._logger.warning("Rejected registration", reason="duplicate_email")
            raise DuplicateEmailError(email=draft.email)

        user = User(
            id=self._id_generator.next_user_id(),
            email=draft.email,
            password=draft.password,
            name=draft.name,
            image=draft.image,
            background_image=draft.background_image,
        )
        self._users[user.id] = user

        self._logger.info("User registered", user_id=user.id)
        return user

    def add_or_remove_friend(self, user_id: str, friend_id: str) -> User:
        """
        Toggle the friendship between two users.

        The edge is added or removed on both sides, so friendship
        stays symmetric.

        Returns:
            The calling user after the change

        Raises:
            SelfFriendError: If both ids are the same
            UserNotFoundError: If either user does not exist
        """
        if user_id == friend_id:
            self._logger.warning("Rejected friend toggle", reason="self_friend", user_id=user_id)
            raise SelfFriendError(user_id=user_id)

        user = self.get_user(user_id)
        friend = self.get_user(friend_id)

        if user.is_friend_of(friend.id):
            user.friend_ids.remove(friend.id)
            friend.friend_ids.remove(user.id)
            self._logger.info("Friend removed", user_id=user.id, friend_id=friend.id)
        else:
            user.friend_ids.append(friend.id)
            friend.friend_ids.append(user.id)
            self._logger.info("Friend added", user_id=user.id, friend_id=friend.id)

        return user

    # ------------------------------------------------------------------
    # Purchases and reviews
    # ------------------------------------------------------------------

    def purchase_game(self, user_id: str, draft: DraftPurchase) -> User:
        """
        Add a game to a user's library.

        The card details are accepted as-is; no payment is processed.

        Returns:
            The purchasing user

        Raises:
            UserNotFoundError: If the user does not exist
            GameNotFoundError: If the game does not exist
            AlreadyOwnedError: If the user already owns the game
        """
        user = self.get_user(user_id)
        game = self.get_game(draft.game_id)

        if user.owns(game.id):
            self._logger.warning(
                "Rejected purchase", reason="already_owned", user_id=user.id, game_id=game.id
            )
            raise AlreadyOwnedError(user_id=user.id, game_id=game.id)

        user.game_ids.append(game.id)

        self._logger.info("Game purchased", user_id=user.id, game_id=game.id)
        return user

    def add_review(self, user_id: str, draft: DraftReview) -> Game:
        """
        Leave a review on a game.

        Returns:
            The reviewed game, with the new review appended

        Raises:
            UserNotFoundError: If the user does not exist
            GameNotFoundError: If the game does not exist
            NotOwnedError: If the user does not own the game
            DuplicateReviewError: If the user already reviewed the game
        """
        user = self.get_user(user_id)
        game = self.get_game(draft.game_id)

        if not user.owns(game.id):
            self._logger.warning(
                "Rejected review", reason="not_owned", user_id=user.id, game_id=game.id
            )
            raise NotOwnedError(user_id=user.id, game_id=game.id)

        if any(review.author_id == user.id for review in game.reviews):
            self._logger.warning(
                "Rejected review", reason="duplicate_review", user_id=user.id, game_id=game.id
            )
            raise DuplicateReviewError(user_id=user.id, game_id=game.id)

        review = Review(
            id=self._id_generator.next_review_id(),
            author_id=user.id,
            game_id=game.id,
            is_recommended=draft.is_recommended,
            text=draft.text,
        )
        game.reviews.append(review)

        self._logger.info(
            "Review added",
            review_id=review.id,
            user_id=user.id,
            game_id=game.id,
            recommended=review.is_recommended,
        )
        return game

    def get_user_reviews(self, user_id: str) -> list[Review]:
        """
        Get every review written by a user, in catalog order.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = self.get_user(user_id)
        return [
            review
            for game in self._games.values()
            for review in game.reviews
            if review.author_id == user.id
        ]

    # ------------------------------------------------------------------
    # Rankings and listings
    # ------------------------------------------------------------------

    def get_recommended_games(self) -> list[Game]:
        """
        Get the games with the most recommended reviews.

        Ties keep catalog order.
        """
        ranked = sorted(self._games.values(), key=lambda g: g.recommended_count, reverse=True)
        return ranked[: self._config.recommended_limit]

    def get_games(self, page: int = 1) -> PageInfo[Game]:
        """Get one page of the whole catalog."""
        return paginate(self.games, page, self._config.page_size)

    def get_games_by_tag(self, tag_id: str, page: int = 1) -> PageInfo[Game]:
        """
        Get one page of the games carrying a tag.

        Raises:
            TagNotFoundError: If the tag does not exist
            InvalidPageError: If page is less than 1
        """
        tag = self.get_tag(tag_id)
        games = [game for game in self._games.values() if tag.id in game.tag_ids]
        return paginate(games, page, self._config.page_size)

    def get_games_by_developer(self, developer_id: str, page: int = 1) -> PageInfo[Game]:
        """
        Get one page of the games made by a developer.

        Raises:
            DeveloperNotFoundError: If the developer does not exist
            InvalidPageError: If page is less than 1
        """
        developer = self.get_developer(developer_id)
        games = [game for game in self._games.values() if game.developer.id == developer.id]
        return paginate(games, page, self._config.page_size)

    def search_game(self, name: str, page: int = 1) -> PageInfo[Game]:
        """Get one page of the games whose name contains ``name``, ignoring case."""
        needle = name.casefold()
        games = [game for game in self._games.values() if needle in game.name.casefold()]
        return paginate(games, page, self._config.page_size)

    def search_user(self, name: str, page: int = 1) -> PageInfo[User]:
        """Get one page of the users whose name contains ``name``, ignoring case."""
        needle = name.casefold()
        users = [user for user in self._users.values() if needle in user.name.casefold()]
        return paginate(users, page, self._config.page_size)
