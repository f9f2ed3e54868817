"""
Demo catalog builder.

Builds a populated SteamSystem from the static demo data. Prices,
related games, purchases, friendships and reviews come from a seeded
random generator, so a given seed always yields the same catalog.
"""

import random
from datetime import date

import structlog

from steam_catalog.config import get_settings
from steam_catalog.demo.data import DEVELOPERS, GAMES, REVIEW_TEXTS, TAGS, USERS
from steam_catalog.models import (
    CardInfo,
    ContentRating,
    Developer,
    DraftPurchase,
    DraftReview,
    Game,
    Image,
    Price,
    Requirement,
    Tag,
)
from steam_catalog.system import SteamSystem

logger = structlog.get_logger(__name__)

MAX_PRICE = 200.0
RELATED_GAMES = 4
GAMES_PER_USER = 8
FRIENDS_PER_USER = 3
REVIEWS_PER_USER = 5

DEMO_CARD = CardInfo(
    card_holder_name="Demo User",
    number=4111111111111111,
    expiration_date=date(2030, 12, 31),
    cvv=123,
)


def _find_by_name(items: list[Developer] | list[Tag], name: str) -> Developer | Tag:
    for item in items:
        if item.name == name:
            return item
    raise ValueError(f"Unknown demo reference: {name}")


def _build_games(rng: random.Random) -> list[Game]:
    games = [
        Game(
            id=data["id"],
            name=data["name"],
            description=data["description"],
            main_image=Image(url=f"https://media.example.com/games/{data['id']}.jpg"),
            multimedia=[
                Image(url=f"https://media.example.com/games/{data['id']}/{n}.jpg")
                for n in range(3)
            ],
            tags=[_find_by_name(TAGS, name) for name in data["tags"]],
            developer=_find_by_name(DEVELOPERS, data["developer"]),
            esrb=ContentRating.from_label(data["esrb"]),
            price=Price(amount=round(rng.uniform(0.0, MAX_PRICE), 2)),
            requirement=Requirement(**data.get("requirement", {})),
            release_date=date.fromisoformat(data["released"]),
            website=data["website"],
        )
        for data in GAMES
    ]

    for game in games:
        others = [other.id for other in games if other.id != game.id]
        game.related_game_ids.extend(rng.sample(others, k=min(RELATED_GAMES, len(others))))

    return games


def build_demo_system(seed: int | None = None) -> SteamSystem:
    """
    Build a populated demo system.

    Users, purchases, friendships and reviews all go through the
    system's own operations.

    Args:
        seed: Random seed (uses DemoConfig.seed if None)

    Returns:
        SteamSystem with the demo catalog loaded
    """
    if seed is None:
        seed = get_settings().demo.seed
    rng = random.Random(seed)

    system = SteamSystem(_build_games(rng), DEVELOPERS, TAGS)

    for draft in USERS:
        system.add_new_user(draft)

    for user in system.users:
        for game in rng.sample(system.games, k=min(GAMES_PER_USER, len(system.games))):
            system.purchase_game(user.id, DraftPurchase(game_id=game.id, card=DEMO_CARD))

        others = [other for other in system.users if other.id != user.id]
        for other in rng.sample(others, k=min(FRIENDS_PER_USER, len(others))):
            system.add_or_remove_friend(user.id, other.id)

        for game_id in rng.sample(user.game_ids, k=min(REVIEWS_PER_USER, len(user.game_ids))):
            system.add_review(
                user.id,
                DraftReview(
                    game_id=game_id,
                    is_recommended=rng.random() < 0.5,
                    text=rng.choice(REVIEW_TEXTS),
                ),
            )

    logger.info(
        "Demo catalog built",
        seed=seed,
        games=len(system.games),
        users=len(system.users),
        reviews=sum(len(game.reviews) for game in system.games),
    )
    return system
