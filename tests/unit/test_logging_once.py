from __future__ import annotations

import io
import logging
import threading
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from dofpath.util.logging import OnceLogger, configure_logging


class ConfigureLoggingTests(unittest.TestCase):
    def test_configure_logging_creates_handlers(self) -> None:
        with TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "logs" / "dofpath.log"
            logger = configure_logging(log_path=log_path)
            try:
                logger.info("hello")
                configure_logging(log_path=log_path)

                self.assertTrue(log_path.exists())
                contents = log_path.read_text(encoding="utf-8")
                self.assertIn("hello", contents)
                file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
                self.assertEqual(len(file_handlers), 1)
            finally:
                for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
                    logger.removeHandler(handler)
                    handler.close()

    def test_console_handler_follows_requested_stream(self) -> None:
        first, second = io.StringIO(), io.StringIO()
        logger = configure_logging(stream=first)
        try:
            logger.info("to first")
            configure_logging(stream=second)
            logger.info("to second")

            console = [h for h in logger.handlers if type(h) is logging.StreamHandler]
            self.assertEqual(len(console), 1)
            self.assertIn("to first", first.getvalue())
            self.assertNotIn("to second", first.getvalue())
            self.assertIn("to second", second.getvalue())
        finally:
            for handler in [h for h in logger.handlers if type(h) is logging.StreamHandler]:
                logger.removeHandler(handler)


class OnceLoggerTests(unittest.TestCase):
    def test_logs_once_per_key(self) -> None:
        once = OnceLogger(logging.getLogger("dofpath.test"))

        with self.assertLogs("dofpath.test", level=logging.INFO) as captured:
            self.assertTrue(once.once("a", "first %s", 1))
            self.assertFalse(once.once("a", "second %s", 2))
            self.assertTrue(once.once("b", "third"))

        self.assertEqual([r.getMessage() for r in captured.records], ["first 1", "third"])
        self.assertTrue(once.seen("a"))
        self.assertFalse(once.seen("c"))
        self.assertEqual(once.keys, frozenset({"a", "b"}))

    def test_concurrent_callers_log_once(self) -> None:
        once = OnceLogger(logging.getLogger("dofpath.test"))
        results: list[bool] = []
        lock = threading.Lock()

        def worker() -> None:
            logged = once.once("shared", "message")
            with lock:
                results.append(logged)

        with self.assertLogs("dofpath.test", level=logging.INFO):
            threads = [threading.Thread(target=worker) for _ in range(16)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        self.assertEqual(results.count(True), 1)
        self.assertEqual(len(results), 16)


if __name__ == "__main__":
    unittest.main()
