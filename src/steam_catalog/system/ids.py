"""Monotonic identifier generation per entity kind."""

from enum import Enum


class EntityKind(str, Enum):
    """Entity kinds that get generated ids, valued by their id prefix."""

    USER = "u"
    REVIEW = "r"


class IdGenerator:
    """
    Issues ``<prefix>_<n>`` ids, counting from 0 independently per kind.

    Ids are unique for the lifetime of the generator only; nothing is
    persisted across restarts.
    """

    def __init__(self) -> None:
        self._counters: dict[EntityKind, int] = {kind: -1 for kind in EntityKind}

    def next_id(self, kind: EntityKind) -> str:
        """Increment the counter for ``kind`` and return the formatted id."""
        self._counters[kind] += 1
        return f"{kind.value}_{self._counters[kind]}"

    def next_user_id(self) -> str:
        return self.next_id(EntityKind.USER)

    def next_review_id(self) -> str:
        return self.next_id(EntityKind.REVIEW)
