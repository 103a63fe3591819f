"""Read clue and location records from YAML data files.

A clues file is a mapping with a ``clues`` sequence; a locations file is a
mapping with a ``locations`` sequence. Files are told apart by suffix.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from pathlib import Path
from typing import Any

import yaml

from config.settings import settings
from models.enums import DataFileKind
from models.ids import ClueId, LocationId, PersonId
from models.schemas import Clue, LocationDraft
from utils.errors import DataFileError
from utils.validation import require_fields, scalar_text, text_list

logger = logging.getLogger(__name__)

# Plain scalars stay text so ids like 1.10, 010 or "no" keep their spelling;
# only the null resolver is kept for optional fields.
_RETYPING_TAGS = {
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
}


class TextScalarLoader(yaml.SafeLoader):
    pass


TextScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _RETYPING_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}

CLUE_FIELDS = {"id", "locations", "persons", "information"}
LOCATION_FIELDS = {"id", "name", "parent_locations"}


def _load_document(text: str | bytes, source: str, top_key: str) -> list[Any]:
    try:
        document = yaml.load(text, Loader=TextScalarLoader)
    except yaml.YAMLError as exc:
        raise DataFileError(source, f"invalid YAML: {exc}") from exc

    if not isinstance(document, Mapping) or top_key not in document:
        raise DataFileError(source, f"expected a mapping with a {top_key!r} key")
    records = document[top_key]
    if records is None:
        return []
    if not isinstance(records, list):
        raise DataFileError(source, f"{top_key!r} must be a sequence")
    return records


def _clue_from_raw(raw: Any) -> Clue:
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected a mapping, got {type(raw).__name__}")
    require_fields(raw, CLUE_FIELDS)
    return Clue(
        id=ClueId(scalar_text(raw["id"], "id")),
        locations=[LocationId(value) for value in text_list(raw["locations"], "locations")],
        persons=[PersonId(value) for value in text_list(raw["persons"], "persons")],
        information=scalar_text(raw["information"], "information"),
    )


def _location_from_raw(raw: Any) -> LocationDraft:
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected a mapping, got {type(raw).__name__}")
    require_fields(raw, LOCATION_FIELDS)
    info = raw.get("info")
    return LocationDraft(
        id=LocationId(scalar_text(raw["id"], "id")),
        name=scalar_text(raw["name"], "name"),
        parent_locations=[
            LocationId(value) for value in text_list(raw["parent_locations"], "parent_locations")
        ],
        info=scalar_text(info, "info") if info is not None else None,
    )


def parse_clues_document(text: str | bytes, source: str = "<clues>") -> list[Clue]:
    clues: list[Clue] = []
    for position, raw in enumerate(_load_document(text, source, "clues")):
        try:
            clues.append(_clue_from_raw(raw))
        except ValueError as exc:
            raise DataFileError(source, f"clue {position}: {exc}") from exc
    return clues


def parse_locations_document(text: str | bytes, source: str = "<locations>") -> list[LocationDraft]:
    drafts: list[LocationDraft] = []
    for position, raw in enumerate(_load_document(text, source, "locations")):
        try:
            drafts.append(_location_from_raw(raw))
        except ValueError as exc:
            raise DataFileError(source, f"location {position}: {exc}") from exc
    return drafts


def _read_text(path: Path) -> str:
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    return path.read_text(encoding="utf-8")


def read_clues_file(path: Path) -> list[Clue]:
    clues = parse_clues_document(_read_text(path), source=str(path))
    logger.info("Loaded %d clues from %s", len(clues), path)
    return clues


def read_locations_file(path: Path) -> list[LocationDraft]:
    drafts = parse_locations_document(_read_text(path), source=str(path))
    logger.info("Loaded %d locations from %s", len(drafts), path)
    return drafts


def kind_for_path(
    path: Path,
    clues_suffix: str = settings.clues_suffix,
    locations_suffix: str = settings.locations_suffix,
) -> DataFileKind | None:
    if path.name.endswith(clues_suffix):
        return DataFileKind.CLUES
    if path.name.endswith(locations_suffix):
        return DataFileKind.LOCATIONS
    return None


def discover_data_files(
    data_dir: Path,
    clues_suffix: str = settings.clues_suffix,
    locations_suffix: str = settings.locations_suffix,
) -> dict[DataFileKind, list[Path]]:
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory not found: {data_dir}")

    found: dict[DataFileKind, list[Path]] = {kind: [] for kind in DataFileKind}
    for path in sorted(data_dir.rglob("*")):
        if not path.is_file():
            continue
        kind = kind_for_path(path, clues_suffix, locations_suffix)
        if kind is not None:
            found[kind].append(path)
    return found
