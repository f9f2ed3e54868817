"""
Static data for the demo catalog.

Games reference tags and developers by name; the builder resolves
them into entities.
"""

from typing import Any

from steam_catalog.models import Developer, DraftUser, Image, Tag

MEDIA_URL = "https://media.example.com"

TAGS: list[Tag] = [
    Tag(id=f"t_{i}", name=name, image=Image(url=f"{MEDIA_URL}/tags/{i}.jpg"))
    for i, name in enumerate(
        [
            "Singleplayer",
            "Multiplayer",
            "RPG",
            "Open World",
            "Atmospheric",
            "Co-op",
            "Indie",
            "Platformer",
            "Great Soundtrack",
            "Difficult",
        ]
    )
]

DEVELOPERS: list[Developer] = [
    Developer(id=f"d_{i}", name=name, image=Image(url=f"{MEDIA_URL}/developers/{i}.jpg"))
    for i, name in enumerate(
        [
            "CD PROJEKT RED",
            "Rockstar Games",
            "Valve Software",
            "Team Meat",
            "Supergiant Games",
            "Team Cherry",
        ]
    )
]

GAMES: list[dict[str, Any]] = [
    {
        "id": "g_0",
        "name": "The Witcher 3: Wild Hunt",
        "description": "A story-driven open world RPG set in a dark fantasy universe.",
        "tags": ["Singleplayer", "RPG", "Open World", "Atmospheric", "Great Soundtrack"],
        "developer": "CD PROJEKT RED",
        "released": "2015-05-18",
        "esrb": "Mature",
        "website": "https://thewitcher.com",
        "requirement": {
            "os": ["Windows 7 64-bit"],
            "processor": ["Intel CPU Core i5-2500K 3.3GHz"],
            "memory": 6,
            "graphics": ["Nvidia GPU GeForce GTX 660"],
            "directx": "11",
            "storage": 35,
        },
    },
    {
        "id": "g_1",
        "name": "Cyberpunk 2077",
        "description": "An open-world action-adventure story set in Night City.",
        "tags": ["Singleplayer", "RPG", "Open World", "Atmospheric"],
        "developer": "CD PROJEKT RED",
        "released": "2020-12-10",
        "esrb": "Mature",
        "website": "https://www.cyberpunk.net",
    },
    {
        "id": "g_2",
        "name": "Red Dead Redemption 2",
        "description": "An epic tale of life in America at the dawn of the modern age.",
        "tags": ["Singleplayer", "Multiplayer", "Open World", "Atmospheric"],
        "developer": "Rockstar Games",
        "released": "2018-10-26",
        "esrb": "Mature",
        "website": "https://www.rockstargames.com/reddeadredemption2",
    },
    {
        "id": "g_3",
        "name": "Grand Theft Auto V",
        "description": "Three very different criminals plot their own chances of survival.",
        "tags": ["Singleplayer", "Multiplayer", "Open World"],
        "developer": "Rockstar Games",
        "released": "2013-09-17",
        "esrb": "Mature",
        "website": "https://www.rockstargames.com/V",
    },
    {
        "id": "g_4",
        "name": "Portal 2",
        "description": "A hilariously mind-bending puzzle game with a co-op campaign.",
        "tags": ["Singleplayer", "Co-op", "Atmospheric", "Great Soundtrack"],
        "developer": "Valve Software",
        "released": "2011-04-18",
        "esrb": "Everyone 10+",
        "website": "https://www.thinkwithportals.com",
    },
    {
        "id": "g_5",
        "name": "Portal",
        "description": "A single-player puzzle game built around a portal gun.",
        "tags": ["Singleplayer", "Atmospheric"],
        "developer": "Valve Software",
        "released": "2007-10-09",
        "esrb": "Teen",
        "website": "https://www.thinkwithportals.com",
    },
    {
        "id": "g_6",
        "name": "Left 4 Dead 2",
        "description": "A co-op action horror shooter against hordes of the infected.",
        "tags": ["Multiplayer", "Co-op"],
        "developer": "Valve Software",
        "released": "2009-11-17",
        "esrb": "Mature",
        "website": "https://www.l4d.com",
    },
    {
        "id": "g_7",
        "name": "Super Meat Boy",
        "description": "A tough as nails platformer about a boy made of meat.",
        "tags": ["Singleplayer", "Indie", "Platformer", "Difficult", "Great Soundtrack"],
        "developer": "Team Meat",
        "released": "2010-10-20",
        "esrb": "Teen",
        "website": "https://supermeatboy.com",
    },
    {
        "id": "g_8",
        "name": "Hades",
        "description": "A god-like rogue-like dungeon crawler.",
        "tags": ["Singleplayer", "Indie", "RPG", "Difficult", "Great Soundtrack"],
        "developer": "Supergiant Games",
        "released": "2020-09-17",
        "esrb": "Teen",
        "website": "https://www.supergiantgames.com/games/hades",
    },
    {
        "id": "g_9",
        "name": "Bastion",
        "description": "An action role-playing experience with a reactive narrator.",
        "tags": ["Singleplayer", "Indie", "RPG", "Atmospheric"],
        "developer": "Supergiant Games",
        "released": "2011-07-20",
        "esrb": "Everyone 10+",
        "website": "https://www.supergiantgames.com/games/bastion",
    },
    {
        "id": "g_10",
        "name": "Transistor",
        "description": "A sci-fi themed action RPG with a talking sword.",
        "tags": ["Singleplayer", "Indie", "RPG", "Great Soundtrack"],
        "developer": "Supergiant Games",
        "released": "2014-05-20",
        "esrb": "Everyone 10+",
        "website": "https://www.supergiantgames.com/games/transistor",
    },
    {
        "id": "g_11",
        "name": "Hollow Knight",
        "description": "A classically styled 2D action adventure across a ruined kingdom.",
        "tags": ["Singleplayer", "Indie", "Platformer", "Atmospheric", "Difficult"],
        "developer": "Team Cherry",
        "released": "2017-02-24",
        "esrb": "Everyone 10+",
        "website": "https://www.hollowknight.com",
    },
]

USERS: list[DraftUser] = [
    DraftUser(
        name=name,
        email=f"{name.lower()}@example.com",
        password=f"password_{name.lower()}",
        image=f"{MEDIA_URL}/users/{name.lower()}.jpg",
        background_image=f"{MEDIA_URL}/users/{name.lower()}_background.jpg",
    )
    for name in ["Ada", "Grace", "Linus", "Margaret", "Alan", "Barbara", "Dennis", "Ken"]
]

REVIEW_TEXTS: list[str] = [
    "Great game, would play again.",
    "Amazing story and characters.",
    "Not my kind of game.",
    "Too short for the price.",
    "Incredible soundtrack.",
    "Runs poorly on my machine.",
    "One of the best games I have ever played.",
    "Fun with friends, boring alone.",
]
