"""Identifier wrappers for persons, clues and locations.

Each id wraps a plain string. Equality and hashing use the exact string, with
no normalization or case folding, and ids of different kinds never compare
equal to each other.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PersonId:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ClueId:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class LocationId:
    value: str

    def __str__(self) -> str:
        return self.value
