"""Index locations by id and derive each location's children."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator
import logging
from typing import DefaultDict

from models.ids import LocationId
from models.schemas import Location, LocationDraft
from utils.errors import IndexBuildError

logger = logging.getLogger(__name__)


class LocationIndex:
    """Owns every location loaded from a locations file.

    ``children_locations`` is computed once in :meth:`from_drafts`. Editing a
    location's ``parent_locations`` through :meth:`get_mut` does not
    recompute any children list.
    """

    def __init__(self) -> None:
        self._locations: dict[LocationId, Location] = {}

    @classmethod
    def from_drafts(cls, drafts: Iterable[LocationDraft]) -> LocationIndex:
        drafts = list(drafts)
        for position, draft in enumerate(drafts):
            if not isinstance(draft, LocationDraft):
                raise IndexBuildError(
                    f"Record {position} is not a LocationDraft: {type(draft).__name__}"
                )

        index = cls()
        for draft in drafts:
            index._locations[draft.id] = draft.finalize()

        children: DefaultDict[LocationId, list[LocationId]] = defaultdict(list)
        for location in index._locations.values():
            for parent_id in location.parent_locations:
                children[parent_id].append(location.id)

        for location_id, location in index._locations.items():
            location.children_locations = children.pop(location_id, [])

        for parent_id, orphaned in children.items():
            logger.debug(
                "Parent %s is not a known location; referenced by %s",
                parent_id,
                ", ".join(str(child) for child in orphaned),
            )
        return index

    def get(self, location_id: LocationId) -> Location | None:
        return self._locations.get(location_id)

    def get_mut(self, location_id: LocationId) -> Location | None:
        """Return the stored location for in-place edits."""
        return self._locations.get(location_id)

    def iter_parents(self, location_id: LocationId) -> Iterator[Location]:
        location = self._locations.get(location_id)
        if location is None:
            return iter(())
        return self._resolve(location.parent_locations)

    def iter_children(self, location_id: LocationId) -> Iterator[Location]:
        location = self._locations.get(location_id)
        if location is None:
            return iter(())
        return self._resolve(location.children_locations)

    def roots(self) -> list[Location]:
        return [
            location
            for location in self._locations.values()
            if not any(parent in self._locations for parent in location.parent_locations)
        ]

    def phantom_parents(self) -> list[tuple[LocationId, LocationId]]:
        return [
            (location.id, parent)
            for location in self._locations.values()
            for parent in location.parent_locations
            if parent not in self._locations
        ]

    def _resolve(self, location_ids: Iterable[LocationId]) -> Iterator[Location]:
        for location_id in location_ids:
            location = self._locations.get(location_id)
            if location is not None:
                yield location

    def __len__(self) -> int:
        return len(self._locations)

    def __contains__(self, location_id: object) -> bool:
        return location_id in self._locations

    def __iter__(self) -> Iterator[Location]:
        return iter(list(self._locations.values()))
