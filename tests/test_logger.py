import io
import logging
import unittest

from wordgrid.utils.logger import configure_logging, get_logger, parse_log_level


class LoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._saved = (list(root.handlers), root.level)

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.handlers[:] = self._saved[0]
        root.setLevel(self._saved[1])

    def test_parse_log_level_accepts_names_and_numbers(self) -> None:
        self.assertEqual(parse_log_level("debug"), logging.DEBUG)
        self.assertEqual(parse_log_level(" WARNING "), logging.WARNING)
        self.assertEqual(parse_log_level("15"), 15)

    def test_parse_log_level_rejects_unknown_names(self) -> None:
        with self.assertRaises(ValueError):
            parse_log_level("loud")

    def test_loggers_live_under_the_package_namespace(self) -> None:
        self.assertEqual(get_logger().name, "wordgrid")
        self.assertEqual(get_logger("cli").name, "wordgrid.cli")
        self.assertEqual(get_logger("wordgrid.engine.grid").name, "wordgrid.engine.grid")

    def test_configure_logging_writes_formatted_lines(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.INFO, stream=stream)
        get_logger("cli").info("hello %s", "grid")
        get_logger("cli").debug("hidden")
        output = stream.getvalue()
        self.assertIn("| INFO    | wordgrid.cli | hello grid", output)
        self.assertNotIn("hidden", output)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
