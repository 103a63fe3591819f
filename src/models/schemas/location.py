"""Schemas for authored location drafts and finalized locations."""

from __future__ import annotations

from dataclasses import dataclass

from models.ids import LocationId


@dataclass(slots=True)
class LocationDraft:
    """A location as authored in a data file.

    Children cannot be authored: they are derived from every other location's
    ``parent_locations`` once the whole file is known.
    """

    id: LocationId
    name: str
    parent_locations: list[LocationId]
    info: str | None = None

    def finalize(self) -> Location:
        """Return the location with no children; the index fills them in."""
        return Location(
            id=self.id,
            name=self.name,
            parent_locations=list(self.parent_locations),
            children_locations=[],
            info=self.info,
        )


@dataclass(slots=True)
class Location:
    id: LocationId
    name: str
    parent_locations: list[LocationId]
    children_locations: list[LocationId]
    info: str | None = None
