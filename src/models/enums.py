"""Common enums used across data-file loading and cross-reference checks."""

from enum import Enum


class DataFileKind(str, Enum):
    CLUES = "clues"
    LOCATIONS = "locations"


class IssueKind(str, Enum):
    CLUE_LOCATION = "clue_location"
    PHANTOM_PARENT = "phantom_parent"
