"""Report references that name no known location.

Nothing here rejects data: clues may point at locations from another file and
locations may name parents that were never authored.
"""

from __future__ import annotations

import pandas as pd

from models.enums import IssueKind
from services.clue_index import ClueIndex
from services.location_index import LocationIndex

ISSUE_COLUMNS = ["kind", "source_id", "missing_id"]


def find_cross_ref_issues(clues: ClueIndex, locations: LocationIndex) -> pd.DataFrame:
    rows: list[dict[str, str]] = []

    for clue in clues:
        for location_id in clue.locations:
            if location_id not in locations:
                rows.append(
                    {
                        "kind": IssueKind.CLUE_LOCATION.value,
                        "source_id": str(clue.id),
                        "missing_id": str(location_id),
                    }
                )

    for location_id, parent_id in locations.phantom_parents():
        rows.append(
            {
                "kind": IssueKind.PHANTOM_PARENT.value,
                "source_id": str(location_id),
                "missing_id": str(parent_id),
            }
        )

    if not rows:
        return pd.DataFrame(columns=ISSUE_COLUMNS)
    return pd.DataFrame(rows, columns=ISSUE_COLUMNS)
