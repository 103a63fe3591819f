"""Application settings loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    app_env: str
    log_level: str
    data_dir: Path
    clues_suffix: str
    locations_suffix: str


def get_settings() -> Settings:
    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        data_dir=Path(os.getenv("REVEALER_DATA_DIR", str(REPO_ROOT / "data" / "samples"))),
        clues_suffix=os.getenv("REVEALER_CLUES_SUFFIX", ".clues.yml"),
        locations_suffix=os.getenv("REVEALER_LOCATIONS_SUFFIX", ".locations.yml"),
    )


settings = get_settings()
