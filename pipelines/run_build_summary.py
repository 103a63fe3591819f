"""Pipeline entrypoint: print clue and location summary tables."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

# Allow running directly from repo root without package installation.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from config.settings import settings  # noqa: E402
from services.data_service import load_data_dir  # noqa: E402
from transform.summary.index_frames import (  # noqa: E402
    clue_counts_by_location,
    clue_counts_by_person,
    location_tree_rows,
)
from utils.errors import DataFileError, IndexBuildError  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize clue and location data files.")
    parser.add_argument(
        "--data-dir",
        default=str(settings.data_dir),
        help="Directory searched for clue and location files.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    try:
        data = load_data_dir(Path(args.data_dir))
    except (FileNotFoundError, DataFileError, IndexBuildError) as exc:
        print(f"[FAIL] {exc}")
        return 1

    sections = [
        ("clues by person", clue_counts_by_person(data.clues)),
        ("clues by location", clue_counts_by_location(data.clues)),
        ("locations", location_tree_rows(data.locations)),
    ]
    for title, frame in sections:
        print(f"== {title}")
        print("(none)" if frame.empty else frame.to_string(index=False))

    print(
        "run_build_summary completed",
        f"data_dir={args.data_dir}",
        f"rows(clues)={len(data.clues)}",
        f"rows(locations)={len(data.locations)}",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
