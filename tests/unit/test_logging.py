from __future__ import annotations

import logging
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from sha256tool.util.logging import configure_logging


class LoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        logger = logging.getLogger("sha256tool")
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(logging.WARNING)

    def test_configure_logging_creates_handlers(self) -> None:
        with TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "logs" / "sha256tool.log"
            logger = configure_logging(level="INFO", log_path=log_path)
            logger.info("hello")
            for handler in logger.handlers:
                handler.flush()

            self.assertTrue(log_path.exists())
            contents = log_path.read_text(encoding="utf-8")
            self.assertIn("hello", contents)

    def test_repeated_calls_do_not_duplicate_handlers(self) -> None:
        with TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "run.log"
            configure_logging(log_path=log_path)
            logger = configure_logging(level="DEBUG", log_path=log_path)

            consoles = [h for h in logger.handlers if not isinstance(h, logging.FileHandler)]
            files = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
            self.assertEqual(len(consoles), 1)
            self.assertEqual(len(files), 1)
            self.assertEqual(logger.level, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
