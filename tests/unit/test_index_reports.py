from __future__ import annotations

from pathlib import Path
import sys
import unittest

import pandas as pd

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "src"))

from models.ids import ClueId, LocationId, PersonId
from models.schemas import Clue, LocationDraft
from services.clue_index import ClueIndex
from services.location_index import LocationIndex
from transform.check.cross_refs import find_cross_ref_issues
from transform.summary.index_frames import (
    clue_counts_by_location,
    clue_counts_by_person,
    location_tree_rows,
)


class TestIndexReports(unittest.TestCase):
    def _clues(self) -> ClueIndex:
        return ClueIndex.from_records(
            [
                Clue(ClueId("c1"), [LocationId("castle")], [PersonId("alice")], "one"),
                Clue(ClueId("c2"), [LocationId("tower")], [PersonId("alice"), PersonId("bob")], "two"),
                Clue(ClueId("c3"), [LocationId("moat")], [PersonId("bob")], "three"),
                Clue(ClueId("c4"), [LocationId("tower")], [PersonId("carol")], "four"),
            ]
        )

    def _locations(self) -> LocationIndex:
        return LocationIndex.from_drafts(
            [
                LocationDraft(LocationId("castle"), "Castle", []),
                LocationDraft(LocationId("tower"), "Tower", [LocationId("castle")]),
                LocationDraft(LocationId("attic"), "Attic", [LocationId("tower"), LocationId("lost_wing")]),
                LocationDraft(LocationId("north"), "North", [LocationId("south")]),
                LocationDraft(LocationId("south"), "South", [LocationId("north")]),
            ]
        )

    def test_cross_ref_issues(self) -> None:
        issues = find_cross_ref_issues(self._clues(), self._locations())

        self.assertEqual(
            issues.to_dict(orient="records"),
            [
                {"kind": "clue_location", "source_id": "c3", "missing_id": "moat"},
                {"kind": "phantom_parent", "source_id": "attic", "missing_id": "lost_wing"},
            ],
        )

    def test_cross_ref_issues_empty(self) -> None:
        issues = find_cross_ref_issues(ClueIndex(), LocationIndex())

        self.assertTrue(issues.empty)
        self.assertEqual(list(issues.columns), ["kind", "source_id", "missing_id"])

    def test_clue_counts(self) -> None:
        by_person = clue_counts_by_person(self._clues())
        by_location = clue_counts_by_location(self._clues())

        self.assertEqual(by_person["person_id"].tolist(), ["alice", "bob", "carol"])
        self.assertEqual(by_person["clue_count"].tolist(), [2, 2, 1])
        self.assertEqual(by_location["location_id"].tolist(), ["tower", "castle", "moat"])
        self.assertEqual(by_location["clue_count"].tolist(), [2, 1, 1])

    def test_location_tree_rows(self) -> None:
        rows = location_tree_rows(self._locations()).set_index("location_id")

        self.assertEqual(int(rows.loc["castle", "depth"]), 0)
        self.assertEqual(int(rows.loc["tower", "depth"]), 1)
        self.assertEqual(int(rows.loc["attic", "depth"]), 2)
        self.assertEqual(int(rows.loc["castle", "child_count"]), 1)
        self.assertEqual(int(rows.loc["attic", "parent_count"]), 2)
        self.assertTrue(pd.isna(rows.loc["north", "depth"]))

    def test_empty_frames(self) -> None:
        self.assertTrue(clue_counts_by_person(ClueIndex()).empty)
        self.assertTrue(location_tree_rows(LocationIndex()).empty)


if __name__ == "__main__":
    unittest.main()
