"""Error types raised while reading data files and building indexes."""

from __future__ import annotations


class DataFileError(ValueError):
    """A data file could not be parsed into records."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class IndexBuildError(ValueError):
    """An index could not be built from the given records."""
