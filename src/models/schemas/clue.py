"""Schema for clue records."""

from dataclasses import dataclass

from models.ids import ClueId, LocationId, PersonId


@dataclass(slots=True)
class Clue:
    """A single piece of information linked to locations and persons.

    ``locations`` and ``persons`` may contain duplicates; they are kept as
    authored.
    """

    id: ClueId
    locations: list[LocationId]
    persons: list[PersonId]
    information: str
