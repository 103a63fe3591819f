"""Schema objects for core entities."""

from .clue import Clue
from .location import Location, LocationDraft

__all__ = ["Clue", "Location", "LocationDraft"]
