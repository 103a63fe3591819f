"""Tabular summaries of built clue and location indexes."""

from __future__ import annotations

from collections import deque

import pandas as pd

from models.ids import LocationId
from services.clue_index import ClueIndex
from services.location_index import LocationIndex


def _count_frame(counts: dict[str, int], key_column: str) -> pd.DataFrame:
    columns = [key_column, "clue_count"]
    if not counts:
        return pd.DataFrame(columns=columns)
    frame = pd.DataFrame(
        [{key_column: key, "clue_count": count} for key, count in counts.items()],
        columns=columns,
    )
    return frame.sort_values(by=["clue_count", key_column], ascending=[False, True]).reset_index(drop=True)


def clue_counts_by_person(clues: ClueIndex) -> pd.DataFrame:
    counts = {str(person): sum(1 for _ in clues.get_by_person(person)) for person in clues.persons()}
    return _count_frame(counts, "person_id")


def clue_counts_by_location(clues: ClueIndex) -> pd.DataFrame:
    counts = {
        str(location): sum(1 for _ in clues.get_by_location(location)) for location in clues.locations()
    }
    return _count_frame(counts, "location_id")


def _depths_from_roots(locations: LocationIndex) -> dict[LocationId, int]:
    depths: dict[LocationId, int] = {}
    queue: deque[LocationId] = deque()
    for root in locations.roots():
        depths[root.id] = 0
        queue.append(root.id)

    while queue:
        current = queue.popleft()
        for child in locations.iter_children(current):
            if child.id in depths:
                continue
            depths[child.id] = depths[current] + 1
            queue.append(child.id)
    return depths


def location_tree_rows(locations: LocationIndex) -> pd.DataFrame:
    columns = ["location_id", "name", "parent_count", "child_count", "depth"]
    if len(locations) == 0:
        return pd.DataFrame(columns=columns)

    depths = _depths_from_roots(locations)
    frame = pd.DataFrame(
        [
            {
                "location_id": str(location.id),
                "name": location.name,
                "parent_count": len(location.parent_locations),
                "child_count": len(location.children_locations),
                # Locations only reachable through a cycle have no depth.
                "depth": depths.get(location.id, pd.NA),
            }
            for location in locations
        ],
        columns=columns,
    )
    frame["depth"] = frame["depth"].astype("Int64")
    return frame
