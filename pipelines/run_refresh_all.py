"""Pipeline entrypoint: run validation and summary in sequence."""

from __future__ import annotations

import argparse
from pathlib import Path
import subprocess
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from config.settings import settings  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run full clue/location data refresh sequence.")
    parser.add_argument("--data-dir", default=str(settings.data_dir), help="Directory of data files.")
    parser.add_argument("--strict", action="store_true", help="Fail on dangling references.")
    return parser.parse_args(argv)


def _steps(python_bin: str, data_dir: str, strict: bool) -> list[tuple[str, list[str]]]:
    validate = [python_bin, "pipelines/run_validate_data.py", "--data-dir", data_dir]
    if strict:
        validate.append("--strict")
    return [
        ("validate_data", validate),
        ("build_summary", [python_bin, "pipelines/run_build_summary.py", "--data-dir", data_dir]),
    ]


def _run_step(step_name: str, command: list[str]) -> None:
    print(f"[RUN] {step_name}: {' '.join(command)}", flush=True)
    subprocess.run(command, cwd=REPO_ROOT, check=True)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    for step_name, command in _steps(sys.executable, args.data_dir, args.strict):
        try:
            _run_step(step_name, command)
        except subprocess.CalledProcessError as exc:
            print(f"[FAIL] {step_name}: exit code {exc.returncode}")
            return 1

    print("run_refresh_all completed", f"data_dir={args.data_dir}", f"strict={args.strict}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
