import string
import unittest
from typing import List, Sequence

from wordgrid.core.constants import PRINTABLE_DIRECTIONS, Direction
from wordgrid.core.models import VocabEntry
from wordgrid.engine.rng import SeededRandom
from wordgrid.engine.word_search import WordSearchConfig, WordSearchGenerator, generate_word_search


class ScriptedRandom:
    """Replays fixed draws, then repeats ``default`` forever."""

    def __init__(self, values: Sequence[float], default: float = 0.5) -> None:
        self.values: List[float] = list(values)
        self.default = default
        self.calls = 0

    def next(self) -> float:
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.default


class WordSearchGeneratorTests(unittest.TestCase):
    def test_fixed_draws_place_words_left_to_right(self) -> None:
        # direction E (index 0), row, col for each word
        rng = ScriptedRandom([0.0, 0.0, 0.0, 0.0, 0.45, 0.0])
        generator = WordSearchGenerator(WordSearchConfig(size=5), rng)

        puzzle = generator.generate(["CAT", "DOG"])

        self.assertEqual(puzzle.grid[0][:3], ["C", "A", "T"])
        self.assertEqual(puzzle.grid[2][:3], ["D", "O", "G"])
        self.assertEqual([w.text for w in puzzle.placed_words], ["CAT", "DOG"])
        self.assertEqual(puzzle.unplaced, [])
        for row in puzzle.grid:
            for letter in row:
                self.assertIn(letter, string.ascii_uppercase)
                self.assertEqual(len(letter), 1)

    def test_filler_is_drawn_once_per_uncovered_cell(self) -> None:
        rng = ScriptedRandom([0.0, 0.0, 0.0], default=0.999)
        puzzle = WordSearchGenerator(WordSearchConfig(size=4), rng).generate(["CAT"])

        self.assertEqual(rng.calls, 3 + 13)
        self.assertEqual(puzzle.grid[0], ["C", "A", "T", "Z"])
        self.assertEqual(sum(row.count("Z") for row in puzzle.grid), 13)

    def test_positions_read_back_as_word_text(self) -> None:
        words = ["python", "grid", "search", "letter", "puzzle", "vocab", "learn", "word"]
        for seed in range(20):
            puzzle = generate_word_search(words, size=10, seed=seed)
            for placed in puzzle.placed_words:
                self.assertEqual(puzzle.read(placed.positions), placed.text)
                self.assertEqual(len(placed.positions), placed.length)
            self.assertEqual(len(puzzle.placed_words) + len(puzzle.unplaced), len(words))

    def test_same_seed_reproduces_grid(self) -> None:
        words = ["alpha", "beta", "gamma", "delta"]
        first = generate_word_search(words, size=8, seed=42)
        second = generate_word_search(words, size=8, seed=42)
        self.assertEqual(first.grid, second.grid)
        self.assertEqual(
            [(w.start_row, w.start_col, w.direction) for w in first.placed_words],
            [(w.start_row, w.start_col, w.direction) for w in second.placed_words],
        )

    def test_multi_word_terms_collapse_to_one_token(self) -> None:
        config = WordSearchConfig(size=15, directions=(Direction.E,))
        puzzle = WordSearchGenerator(config, SeededRandom(3)).generate(["sound sensor"])
        self.assertEqual(puzzle.placed_words[0].text, "SOUNDSENSOR")

    def test_entries_without_letters_are_unplaced_without_attempts(self) -> None:
        rng = ScriptedRandom([], default=0.0)
        puzzle = WordSearchGenerator(WordSearchConfig(size=3), rng).generate(["   ", "123"])
        self.assertEqual(puzzle.placed_words, [])
        self.assertEqual(puzzle.unplaced, ["   ", "123"])
        self.assertEqual(rng.calls, 9)

    def test_word_longer_than_grid_is_always_unplaced(self) -> None:
        config = WordSearchConfig(size=5, max_attempts=1000)
        puzzle = WordSearchGenerator(config, SeededRandom(7)).generate(["ABCDEF", "CAT"])
        self.assertEqual(puzzle.unplaced, ["ABCDEF"])
        self.assertEqual([w.text for w in puzzle.placed_words], ["CAT"])

    def test_word_of_grid_length_starts_at_offset_zero(self) -> None:
        config = WordSearchConfig(size=5, directions=(Direction.E,), max_attempts=500)
        puzzle = WordSearchGenerator(config, SeededRandom(11)).generate(["ABCDE"])
        self.assertEqual(len(puzzle.placed_words), 1)
        self.assertEqual(puzzle.placed_words[0].start_col, 0)

    def test_exhausted_word_is_not_retried(self) -> None:
        config = WordSearchConfig(size=2, directions=(Direction.E,), max_attempts=200)
        puzzle = WordSearchGenerator(config, SeededRandom(1)).generate(["AB", "CD", "EF"])
        self.assertEqual([w.text for w in puzzle.placed_words], ["AB", "CD"])
        self.assertEqual(puzzle.unplaced, ["EF"])

    def test_vocab_entries_carry_their_clue(self) -> None:
        rng = ScriptedRandom([0.0, 0.0, 0.0])
        puzzle = WordSearchGenerator(WordSearchConfig(size=5), rng).generate(
            [VocabEntry(word="cat", clue="small feline")]
        )
        self.assertEqual(puzzle.placed_words[0].clue, "small feline")
        self.assertEqual(puzzle.placed_words[0].id, "W1")

    def test_printable_config_uses_forward_directions(self) -> None:
        config = WordSearchConfig.printable()
        self.assertEqual(config.directions, PRINTABLE_DIRECTIONS)
        self.assertEqual(config.max_attempts, 50)
        puzzle = WordSearchGenerator(config, SeededRandom(5)).generate(["forward", "reading", "only"])
        for placed in puzzle.placed_words:
            self.assertIn(placed.direction, PRINTABLE_DIRECTIONS)

    def test_invalid_config_raises(self) -> None:
        with self.assertRaises(ValueError):
            WordSearchConfig(size=0)
        with self.assertRaises(ValueError):
            WordSearchConfig(directions=())
        with self.assertRaises(ValueError):
            WordSearchConfig(max_attempts=0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
