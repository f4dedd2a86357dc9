"""Star Wars data and implementation map used by end-to-end tests."""

from __future__ import annotations

from typing import Any

LUKE = {
    "id": "1000",
    "name": "Luke Skywalker",
    "friends": ["1002", "1003", "2000", "2001"],
    "appearsIn": [4, 5, 6],
    "homePlanet": "Tatooine",
}

VADER = {
    "id": "1001",
    "name": "Darth Vader",
    "friends": ["1004"],
    "appearsIn": [4, 5, 6],
    "homePlanet": "Tatooine",
}

HAN = {
    "id": "1002",
    "name": "Han Solo",
    "friends": ["1000", "1003", "2001"],
    "appearsIn": [4, 5, 6],
}

LEIA = {
    "id": "1003",
    "name": "Leia Organa",
    "friends": ["1000", "1002", "2000", "2001"],
    "appearsIn": [4, 5, 6],
    "homePlanet": "Alderaan",
}

TARKIN = {
    "id": "1004",
    "name": "Wilhuff Tarkin",
    "friends": ["1001"],
    "appearsIn": [4],
}

THREEPIO = {
    "id": "2000",
    "name": "C-3PO",
    "friends": ["1000", "1002", "1003", "2001"],
    "appearsIn": [4, 5, 6],
    "primaryFunction": "Protocol",
}

ARTOO = {
    "id": "2001",
    "name": "R2-D2",
    "friends": ["1000", "1002", "1003"],
    "appearsIn": [4, 5, 6],
    "primaryFunction": "Astromech",
}

HUMANS = {human["id"]: human for human in (LUKE, VADER, HAN, LEIA, TARKIN)}
DROIDS = {droid["id"]: droid for droid in (THREEPIO, ARTOO)}


async def get_character(character_id: str) -> dict[str, Any] | None:
    return HUMANS.get(character_id) or DROIDS.get(character_id)


async def get_friends(character: dict[str, Any], info: Any) -> list[dict[str, Any] | None]:
    return [await get_character(friend_id) for friend_id in character["friends"]]


def get_hero(root: Any, info: Any, episode: int | None = None) -> dict[str, Any]:
    # Luke is the hero of Episode V.
    if episode == 5:
        return LUKE
    return ARTOO


def get_human(root: Any, info: Any, id: str) -> dict[str, Any] | None:
    return HUMANS.get(id)


def get_droid(root: Any, info: Any, id: str) -> dict[str, Any] | None:
    return DROIDS.get(id)


def resolve_character_type(character: dict[str, Any], info: Any, abstract_type: Any) -> Any:
    if character["id"].startswith("1"):
        return "Human"
    return info.schema.get_type("Droid")


IMPLEMENTATION = {
    "Character": {"resolveType": resolve_character_type},
    "Episode": {"NEWHOPE": 4, "EMPIRE": 5, "JEDI": 6},
    "Human": {"friends": get_friends},
    "Droid": {"friends": get_friends},
    "Query": {"hero": get_hero, "human": get_human, "droid": get_droid},
}
