"""Build clue and location indexes from a directory of data files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from config.settings import settings
from extract.yaml_reader import discover_data_files, read_clues_file, read_locations_file
from models.enums import DataFileKind
from models.schemas import Clue, LocationDraft
from services.clue_index import ClueIndex
from services.location_index import LocationIndex


@dataclass
class LoadedData:
    clues: ClueIndex
    locations: LocationIndex
    clue_files: list[Path] = field(default_factory=list)
    location_files: list[Path] = field(default_factory=list)


def load_data_dir(data_dir: Path | None = None) -> LoadedData:
    """Read every data file under ``data_dir`` and build both indexes.

    Files of one kind are read in sorted path order and their records are
    concatenated before the index is built, so a later file's record replaces
    an earlier one with the same id.
    """
    data_dir = data_dir or settings.data_dir
    files = discover_data_files(data_dir)

    raw_clues: list[Clue] = []
    for path in files[DataFileKind.CLUES]:
        raw_clues.extend(read_clues_file(path))

    raw_locations: list[LocationDraft] = []
    for path in files[DataFileKind.LOCATIONS]:
        raw_locations.extend(read_locations_file(path))

    return LoadedData(
        clues=ClueIndex.from_records(raw_clues),
        locations=LocationIndex.from_drafts(raw_locations),
        clue_files=files[DataFileKind.CLUES],
        location_files=files[DataFileKind.LOCATIONS],
    )
