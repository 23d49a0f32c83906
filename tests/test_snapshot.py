import unittest

from wordgrid.core.exceptions import RestoreMismatchError, SnapshotError
from wordgrid.engine.crossword import CrosswordGenerator
from wordgrid.engine.crossword_session import CrosswordSession
from wordgrid.engine.word_search import generate_word_search
from wordgrid.engine.word_search_session import WordSearchSession
from wordgrid.io.snapshot import (
    dumps,
    ensure_snapshot_matches,
    loads,
    restore_session,
    snapshot_matches,
    snapshot_session,
)


WORDS = ["planet", "orbit", "comet", "galaxy", "star"]


class WordSearchSnapshotTests(unittest.TestCase):
    def setUp(self) -> None:
        self.puzzle = generate_word_search(WORDS, size=10, seed=9)
        self.session = WordSearchSession(self.puzzle)
        first = self.puzzle.placed_words[0]
        self.session.pointer_down(*first.positions[0])
        for cell in first.positions[1:]:
            self.session.pointer_move(*cell)
        self.session.pointer_up()

    def test_round_trip_reproduces_grid_and_found_words(self) -> None:
        doc = loads(dumps(snapshot_session(self.session)))
        restored = restore_session(doc)

        self.assertIsInstance(restored, WordSearchSession)
        self.assertEqual(restored.puzzle.grid, self.puzzle.grid)
        self.assertEqual(restored.found_word_ids, self.session.found_word_ids)
        self.assertEqual(restored.puzzle.placed_words, self.puzzle.placed_words)
        self.assertEqual(restored.puzzle.unplaced, self.puzzle.unplaced)
        self.assertEqual(restored.get_score(), self.session.get_score())

    def test_mismatched_vocabulary_is_detected(self) -> None:
        doc = snapshot_session(self.session)
        self.assertTrue(snapshot_matches(doc, WORDS))
        ensure_snapshot_matches(doc, WORDS)
        self.assertFalse(snapshot_matches(doc, WORDS[:-1]))
        with self.assertRaises(RestoreMismatchError):
            ensure_snapshot_matches(doc, WORDS + ["nebula"])

    def test_grid_cells_must_be_single_letters(self) -> None:
        for bad_value in ("AB", 5, None):
            doc = snapshot_session(self.session)
            doc["grid"][0][0] = bad_value
            with self.assertRaises(SnapshotError):
                restore_session(doc)

    def test_grid_disagreeing_with_word_is_rejected(self) -> None:
        doc = snapshot_session(self.session)
        row, col = doc["placed_words"][0]["positions"][0]
        original = doc["grid"][row][col]
        doc["grid"][row][col] = "A" if original != "A" else "B"
        with self.assertRaises(SnapshotError):
            restore_session(doc)


class CrosswordSnapshotTests(unittest.TestCase):
    def setUp(self) -> None:
        puzzle = CrosswordGenerator().generate([("sun", "star"), ("run", "jog"), ("nut", "seed")])
        self.session = CrosswordSession(puzzle)
        self.session.enter(7, 6, "s")
        self.session.enter(7, 7, "U")

    def test_round_trip_reproduces_layout_and_entries(self) -> None:
        doc = loads(dumps(snapshot_session(self.session)))
        restored = restore_session(doc)

        self.assertIsInstance(restored, CrosswordSession)
        self.assertEqual(restored.puzzle.grid, self.session.puzzle.grid)
        self.assertEqual(restored.entries, self.session.entries)
        self.assertEqual(restored.puzzle.across, self.session.puzzle.across)
        self.assertEqual(restored.puzzle.down, self.session.puzzle.down)
        self.assertEqual(restored.puzzle.cell_numbers, self.session.puzzle.cell_numbers)
        self.assertEqual(restored.get_score(), self.session.get_score())

    def test_entries_are_not_shared_with_the_snapshot(self) -> None:
        doc = snapshot_session(self.session)
        doc["entries"][7][6] = "X"
        self.assertEqual(self.session.value(7, 6), "s")

    def test_clue_lists_of_wrong_shape_are_rejected(self) -> None:
        doc = snapshot_session(self.session)
        doc["clues"] = []
        with self.assertRaises(SnapshotError):
            restore_session(doc)

    def test_non_text_entry_is_rejected(self) -> None:
        doc = snapshot_session(self.session)
        doc["entries"][7][6] = 5
        with self.assertRaises(SnapshotError):
            restore_session(doc)

    def test_entries_of_wrong_shape_are_rejected(self) -> None:
        doc = snapshot_session(self.session)
        doc["entries"] = [1, 2, 3]
        with self.assertRaises(SnapshotError):
            restore_session(doc)

    def test_letter_outside_every_word_is_rejected(self) -> None:
        doc = snapshot_session(self.session)
        self.assertIsNone(doc["grid"][0][0])
        doc["grid"][0][0] = "Q"
        with self.assertRaises(SnapshotError):
            restore_session(doc)

    def test_blanked_word_cell_is_rejected(self) -> None:
        doc = snapshot_session(self.session)
        doc["grid"][7][6] = None
        with self.assertRaises(SnapshotError):
            restore_session(doc)

    def test_session_options_reach_the_restored_session(self) -> None:
        progress = []
        generator = CrosswordGenerator()
        restored = restore_session(
            snapshot_session(self.session),
            on_progress=progress.append,
            regenerate=lambda: generator.generate([("sun", "star"), ("run", "jog")]),
        )
        restored.enter(7, 8, "N")
        self.assertEqual(len(progress), 1)
        self.assertTrue(restored.restart().is_replay)
        self.assertEqual(restored.value(7, 6), "")


class MalformedSnapshotTests(unittest.TestCase):
    def test_invalid_json(self) -> None:
        with self.assertRaises(SnapshotError):
            loads("{not json")
        with self.assertRaises(SnapshotError):
            loads("[1, 2]")

    def test_document_must_be_an_object(self) -> None:
        with self.assertRaises(SnapshotError):
            restore_session(["word_search"])

    def test_unknown_kind(self) -> None:
        with self.assertRaises(SnapshotError):
            restore_session({"kind": "sudoku"})

    def test_missing_grid(self) -> None:
        with self.assertRaises(SnapshotError):
            restore_session({"kind": "word_search", "size": 3})

    def test_wrong_grid_shape(self) -> None:
        with self.assertRaises(SnapshotError):
            restore_session({"kind": "crossword", "size": 2, "grid": [[None, None]]})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
