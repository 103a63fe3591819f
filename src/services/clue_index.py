"""Index clues by id with reverse lookups by person and by location."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator
from typing import DefaultDict

from models.ids import ClueId, LocationId, PersonId
from models.schemas import Clue
from utils.errors import IndexBuildError


class ClueIndex:
    """Owns every clue loaded from a clues file.

    The person and location tables are filled by :meth:`insert` only. Changing
    a clue's ``persons`` or ``locations`` through :meth:`get_mut` afterwards
    leaves those tables stale; lookups then skip ids that no longer resolve.
    """

    def __init__(self) -> None:
        self._clues: dict[ClueId, Clue] = {}
        self._by_person: DefaultDict[PersonId, list[ClueId]] = defaultdict(list)
        self._by_location: DefaultDict[LocationId, list[ClueId]] = defaultdict(list)

    @classmethod
    def from_records(cls, clues: Iterable[Clue]) -> ClueIndex:
        index = cls()
        for position, clue in enumerate(clues):
            if not isinstance(clue, Clue):
                raise IndexBuildError(f"Record {position} is not a Clue: {type(clue).__name__}")
            index.insert(clue)
        return index

    def insert(self, clue: Clue) -> None:
        # Re-inserting an existing id replaces the record but keeps the old
        # reverse entries.
        for person in clue.persons:
            self._by_person[person].append(clue.id)
        for location in clue.locations:
            self._by_location[location].append(clue.id)
        self._clues[clue.id] = clue

    def get(self, clue_id: ClueId) -> Clue | None:
        return self._clues.get(clue_id)

    def get_mut(self, clue_id: ClueId) -> Clue | None:
        """Return the stored clue for in-place edits.

        Edits are not reflected in the person and location tables.
        """
        return self._clues.get(clue_id)

    def get_by_location(self, location: LocationId) -> Iterator[Clue]:
        return self._resolve(self._by_location.get(location, []))

    def get_by_person(self, person: PersonId) -> Iterator[Clue]:
        return self._resolve(self._by_person.get(person, []))

    def get_by_person_and_location(self, person: PersonId, location: LocationId) -> Iterator[Clue]:
        at_location = set(self._by_location.get(location, []))
        matching = [clue_id for clue_id in self._by_person.get(person, []) if clue_id in at_location]
        return self._resolve(matching)

    def persons(self) -> list[PersonId]:
        return list(self._by_person)

    def locations(self) -> list[LocationId]:
        return list(self._by_location)

    def _resolve(self, clue_ids: Iterable[ClueId]) -> Iterator[Clue]:
        for clue_id in clue_ids:
            clue = self._clues.get(clue_id)
            if clue is not None:
                yield clue

    def __len__(self) -> int:
        return len(self._clues)

    def __contains__(self, clue_id: object) -> bool:
        return clue_id in self._clues

    def __iter__(self) -> Iterator[Clue]:
        return iter(list(self._clues.values()))
