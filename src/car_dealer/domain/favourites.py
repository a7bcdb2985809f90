from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_FAVOURITES_PREFIX = "favourites"
_FAVOURITES_VIEW_PREFIX = "views:favourites"


def favourites_key(source_id: str) -> str:
    return f"{_FAVOURITES_PREFIX}:{source_id}"


def favourites_view_key(source_id: str) -> str:
    return f"{_FAVOURITES_VIEW_PREFIX}:{source_id}"


@dataclass(frozen=True, slots=True)
class Favourites:
    """
    Classified ids a visitor has favourited.

    Stored as an ordered sequence but treated as a set: ``toggled`` removes an
    id when present and appends it otherwise, so ids never repeat.
    """

    ids: tuple[int, ...] = ()

    def contains(self, classified_id: int) -> bool:
        return classified_id in self.ids

    def toggled(self, classified_id: int) -> Favourites:
        if self.contains(classified_id):
            return Favourites(ids=tuple(i for i in self.ids if i != classified_id))
        return Favourites(ids=(*self.ids, classified_id))

    def to_payload(self) -> dict[str, list[int]]:
        return {"ids": list(self.ids)}

    @classmethod
    def from_payload(cls, payload: Any) -> Favourites:
        """Rebuild favourites from a stored payload; anything unusable is empty."""
        if not isinstance(payload, dict):
            return cls()

        ids = payload.get("ids")
        if not isinstance(ids, list):
            return cls()

        return cls(ids=tuple(i for i in ids if isinstance(i, int) and not isinstance(i, bool)))
