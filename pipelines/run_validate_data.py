"""Pipeline entrypoint: load every data file and report dangling references."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

import pandas as pd

# Allow running directly from repo root without package installation.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from config.settings import settings  # noqa: E402
from services.data_service import LoadedData, load_data_dir  # noqa: E402
from transform.check.cross_refs import find_cross_ref_issues  # noqa: E402
from utils.errors import DataFileError, IndexBuildError  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate clue and location data files.")
    parser.add_argument(
        "--data-dir",
        default=str(settings.data_dir),
        help="Directory searched for clue and location files.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero when any dangling reference is found.",
    )
    return parser.parse_args(argv)


def _collect_issues(data: LoadedData) -> pd.DataFrame:
    return find_cross_ref_issues(data.clues, data.locations)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=settings.log_level)
    data_dir = Path(args.data_dir)

    try:
        data = load_data_dir(data_dir)
    except (FileNotFoundError, DataFileError, IndexBuildError) as exc:
        print(f"[FAIL] {exc}")
        return 1

    issues = _collect_issues(data)
    if not issues.empty:
        print(issues.to_string(index=False))

    print(
        "run_validate_data completed",
        f"data_dir={data_dir}",
        f"files(clues)={len(data.clue_files)}",
        f"files(locations)={len(data.location_files)}",
        f"rows(clues)={len(data.clues)}",
        f"rows(locations)={len(data.locations)}",
        f"rows(issues)={len(issues)}",
    )
    return 1 if args.strict and not issues.empty else 0


if __name__ == "__main__":
    raise SystemExit(main())
