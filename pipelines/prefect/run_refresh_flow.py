"""Prefect flow to orchestrate data validation and summary output."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
import subprocess
import sys
from typing import Sequence

from prefect import flow, get_run_logger, task

REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT / "src"))

from config.settings import settings  # noqa: E402


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run clue/location data refresh flow via Prefect.")
    parser.add_argument(
        "--data-dir",
        default=str(settings.data_dir),
        help="Directory searched for clue and location files.",
    )
    parser.add_argument("--strict", action="store_true", help="Fail on dangling references.")
    return parser.parse_args()


def _run_subprocess(command: Sequence[str]) -> tuple[int, str, str]:
    env = os.environ.copy()
    env.setdefault("PYTHONUNBUFFERED", "1")
    result = subprocess.run(command, cwd=REPO_ROOT, env=env, capture_output=True, text=True, check=False)
    return result.returncode, result.stdout, result.stderr


def _run_pipeline_script(step: str, script: str, args: list[str]) -> str:
    logger = get_run_logger()
    command = [sys.executable, f"pipelines/{script}", *args]
    logger.info("Running step=%s command=%s", step, " ".join(command))

    return_code, stdout, stderr = _run_subprocess(command)
    if stdout.strip():
        logger.info(stdout.strip())
    if return_code != 0:
        if stderr.strip():
            logger.error(stderr.strip())
        raise RuntimeError(f"Step {step} failed with exit code {return_code}")
    return stdout


@task(name="validate-data", retries=0)
def validate_data(data_dir: str, strict: bool = False) -> str:
    args = ["--data-dir", data_dir]
    if strict:
        args.append("--strict")
    return _run_pipeline_script("validate_data", "run_validate_data.py", args)


@task(name="build-summary", retries=0)
def build_summary(data_dir: str) -> str:
    return _run_pipeline_script("build_summary", "run_build_summary.py", ["--data-dir", data_dir])


@flow(name="revealer-data-refresh", log_prints=True)
def refresh_data_flow(data_dir: str | None = None, strict: bool = False) -> None:
    data_dir = data_dir or str(settings.data_dir)
    validate_data(data_dir, strict=strict)
    build_summary(data_dir)


if __name__ == "__main__":
    args = _parse_args()
    refresh_data_flow(data_dir=args.data_dir, strict=args.strict)
