import logging
import os
import tempfile
import unittest

from logging_config import setup_logging, LOGS_DIR


class TestLoggingConfig(unittest.TestCase):
    def test_setup_logging_creates_rotating_and_stream_handlers(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = f"{tmpdir}/test.log"

            logger = setup_logging(name="test_logger", log_file=log_file)

            self.assertIsInstance(logger, logging.Logger)
            self.assertEqual(logger.name, "test_logger")
            self.assertEqual(len(logger.handlers), 2)

            logger.info("hello")
            for h in logger.handlers:
                h.flush()

            with open(log_file, "r", encoding="utf-8") as f:
                self.assertIn("hello", f.read())

            for h in logger.handlers:
                h.close()

    def test_repeated_setup_does_not_duplicate_handlers(self):
        """Streamlit reruns call setup_logging again for the same name."""
        setup_logging(name="test_rerun", log_file="rerun.log")
        logger = setup_logging(name="test_rerun", log_file="rerun.log")
        self.assertEqual(len(logger.handlers), 2)

    def test_default_log_goes_to_logs_dir(self):
        logger = setup_logging(name="test_default_dir")
        file_handler = [h for h in logger.handlers if hasattr(h, "baseFilename")][0]
        self.assertIn(os.sep + "logs" + os.sep, file_handler.baseFilename)
        self.assertTrue(file_handler.baseFilename.endswith("st_machines.log"))

    def test_relative_path_with_dirs_stripped(self):
        """A relative path like 'subdir/foo.log' should be stripped to 'foo.log' in logs/."""
        logger = setup_logging(name="test_strip_dirs", log_file="subdir/foo.log")
        file_handler = [h for h in logger.handlers if hasattr(h, "baseFilename")][0]
        self.assertEqual(file_handler.baseFilename, os.path.join(LOGS_DIR, "foo.log"))

    def test_level_accepts_names(self):
        logger = setup_logging(name="test_level_name", log_file="levels.log", level="debug")
        self.assertEqual(logger.level, logging.DEBUG)

    def test_level_accepts_ints(self):
        logger = setup_logging(name="test_level_int", log_file="levels.log", level=logging.WARNING)
        self.assertEqual(logger.level, logging.WARNING)

    def test_unknown_level_rejected(self):
        with self.assertRaises(ValueError):
            setup_logging(name="test_level_bad", log_file="levels.log", level="LOUD")


if __name__ == "__main__":
    unittest.main()
