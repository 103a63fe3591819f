from __future__ import annotations

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "src"))

from models.ids import ClueId, LocationId, PersonId
from models.schemas import Clue, LocationDraft
from services.clue_index import ClueIndex
from utils.errors import IndexBuildError


def _clue(clue_id: str, persons: list[str], locations: list[str], information: str = "...") -> Clue:
    return Clue(
        id=ClueId(clue_id),
        locations=[LocationId(value) for value in locations],
        persons=[PersonId(value) for value in persons],
        information=information,
    )


def _ids(clues) -> list[str]:
    return [str(clue.id) for clue in clues]


class TestClueIndex(unittest.TestCase):
    def _sample_clues(self) -> list[Clue]:
        return [
            _clue("c1", ["alice"], ["castle"]),
            _clue("c2", ["alice"], ["tower"]),
            _clue("c3", ["bob", "alice"], ["castle", "tower"]),
            _clue("c4", [], ["cellar"]),
        ]

    def test_person_lookup_keeps_file_order(self) -> None:
        index = ClueIndex.from_records(self._sample_clues()[:2])

        self.assertEqual(_ids(index.get_by_person(PersonId("alice"))), ["c1", "c2"])
        self.assertEqual(
            _ids(index.get_by_person_and_location(PersonId("alice"), LocationId("castle"))),
            ["c1"],
        )

    def test_every_reference_is_reachable(self) -> None:
        clues = self._sample_clues()
        index = ClueIndex.from_records(clues)

        for clue in clues:
            for person in clue.persons:
                self.assertIn(clue.id, [c.id for c in index.get_by_person(person)])
            for location in clue.locations:
                self.assertIn(clue.id, [c.id for c in index.get_by_location(location)])

    def test_person_and_location_is_subset_of_both(self) -> None:
        index = ClueIndex.from_records(self._sample_clues())

        for person in index.persons():
            for location in index.locations():
                both = set(_ids(index.get_by_person_and_location(person, location)))
                by_person = set(_ids(index.get_by_person(person)))
                by_location = set(_ids(index.get_by_location(location)))
                self.assertLessEqual(both, by_person & by_location)

    def test_duplicate_references_follow_person_sequence(self) -> None:
        index = ClueIndex.from_records([_clue("c1", ["alice", "alice"], ["castle", "castle"])])

        self.assertEqual(_ids(index.get_by_location(LocationId("castle"))), ["c1", "c1"])
        self.assertEqual(
            _ids(index.get_by_person_and_location(PersonId("alice"), LocationId("castle"))),
            ["c1", "c1"],
        )

    def test_reinsert_replaces_record_but_keeps_stale_entries(self) -> None:
        index = ClueIndex.from_records([_clue("c1", ["alice"], ["castle"], "first")])
        index.insert(_clue("c1", ["alice"], ["tower"], "second"))

        self.assertEqual(len(index), 1)
        self.assertEqual(index.get(ClueId("c1")).information, "second")
        self.assertEqual(_ids(index.get_by_person(PersonId("alice"))), ["c1", "c1"])
        self.assertEqual(_ids(index.get_by_location(LocationId("castle"))), ["c1"])

    def test_get_mut_edits_do_not_reindex(self) -> None:
        index = ClueIndex.from_records([_clue("c1", ["alice"], ["castle"])])

        clue = index.get_mut(ClueId("c1"))
        clue.persons = [PersonId("bob")]
        clue.information = "rewritten"

        self.assertEqual(index.get(ClueId("c1")).information, "rewritten")
        self.assertEqual(_ids(index.get_by_person(PersonId("alice"))), ["c1"])
        self.assertEqual(_ids(index.get_by_person(PersonId("bob"))), [])

    def test_unknown_ids_return_empty(self) -> None:
        for index in (ClueIndex(), ClueIndex.from_records([]), ClueIndex.from_records(self._sample_clues())):
            self.assertIsNone(index.get(ClueId("missing")))
            self.assertIsNone(index.get_mut(ClueId("missing")))
            self.assertEqual(list(index.get_by_person(PersonId("nobody"))), [])
            self.assertEqual(list(index.get_by_location(LocationId("nowhere"))), [])
            self.assertEqual(
                list(index.get_by_person_and_location(PersonId("nobody"), LocationId("nowhere"))),
                [],
            )

    def test_ids_of_different_kinds_do_not_collide(self) -> None:
        index = ClueIndex.from_records([_clue("castle", ["castle"], ["castle"])])

        self.assertNotIn(LocationId("castle"), index)
        self.assertIn(ClueId("castle"), index)
        self.assertEqual(_ids(index.get_by_person(PersonId("castle"))), ["castle"])
        self.assertEqual(list(index.get_by_person(PersonId("Castle"))), [])

    def test_build_is_deterministic(self) -> None:
        first = ClueIndex.from_records(self._sample_clues())
        second = ClueIndex.from_records(self._sample_clues())

        self.assertEqual(first.persons(), second.persons())
        self.assertEqual(first.locations(), second.locations())
        for person in first.persons():
            self.assertEqual(_ids(first.get_by_person(person)), _ids(second.get_by_person(person)))
        for location in first.locations():
            self.assertEqual(_ids(first.get_by_location(location)), _ids(second.get_by_location(location)))

    def test_rejects_non_clue_records(self) -> None:
        draft = LocationDraft(id=LocationId("castle"), name="Castle", parent_locations=[])
        with self.assertRaises(IndexBuildError):
            ClueIndex.from_records([_clue("c1", ["alice"], ["castle"]), draft])

    def test_instances_do_not_share_state(self) -> None:
        first = ClueIndex()
        second = ClueIndex()
        first.insert(_clue("c1", ["alice"], ["castle"]))

        self.assertEqual(len(second), 0)
        self.assertEqual(list(second.get_by_person(PersonId("alice"))), [])


if __name__ == "__main__":
    unittest.main()
