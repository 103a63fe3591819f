"""Pipeline utility: look up clues or related locations from the command line."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

# Allow running directly from repo root without package installation.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from config.settings import settings  # noqa: E402
from models.ids import LocationId, PersonId  # noqa: E402
from services.data_service import LoadedData, load_data_dir  # noqa: E402
from utils.errors import DataFileError, IndexBuildError  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Look up clues by person/location or browse locations.")
    parser.add_argument(
        "--data-dir",
        default=str(settings.data_dir),
        help="Directory searched for clue and location files.",
    )
    parser.add_argument("--person", help="Person id to match clues against.")
    parser.add_argument("--location", help="Location id to match clues against.")
    relation = parser.add_mutually_exclusive_group()
    relation.add_argument("--parents-of", help="List the parent locations of this location id.")
    relation.add_argument("--children-of", help="List the child locations of this location id.")
    args = parser.parse_args(argv)

    if (args.parents_of or args.children_of) and (args.person or args.location):
        parser.error("--parents-of/--children-of cannot be combined with --person/--location")
    if not any([args.person, args.location, args.parents_of, args.children_of]):
        parser.error("one of --person, --location, --parents-of or --children-of is required")
    return args


def _lookup_lines(data: LoadedData, args: argparse.Namespace) -> list[str]:
    if args.parents_of:
        return [f"{loc.id}\t{loc.name}" for loc in data.locations.iter_parents(LocationId(args.parents_of))]
    if args.children_of:
        return [f"{loc.id}\t{loc.name}" for loc in data.locations.iter_children(LocationId(args.children_of))]

    if args.person and args.location:
        clues = data.clues.get_by_person_and_location(PersonId(args.person), LocationId(args.location))
    elif args.person:
        clues = data.clues.get_by_person(PersonId(args.person))
    else:
        clues = data.clues.get_by_location(LocationId(args.location))
    return [f"{clue.id}\t{clue.information}" for clue in clues]


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    try:
        data = load_data_dir(Path(args.data_dir))
    except (FileNotFoundError, DataFileError, IndexBuildError) as exc:
        print(f"[FAIL] {exc}")
        return 1

    lines = _lookup_lines(data, args)
    for line in lines:
        print(line)
    print("run_lookup completed", f"matches={len(lines)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
