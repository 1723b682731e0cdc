import logging
import os
import tempfile
import unittest
from pathlib import Path

from ltcmarkers.utils import logger as log_module
from ltcmarkers.utils.logger import (
    LOGGER_PREFIX,
    get_logger,
    log_banner,
    quiet_logging,
    setup_logging,
)


class TestLogger(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        # Release the log file before the directory goes away
        setup_logging(console=False)
        self._tmp.cleanup()

    def test_module_loggers_live_under_package_namespace(self):
        self.assertEqual(get_logger("importer").name, "ltcmarkers.importer")
        self.assertEqual(get_logger("ltcmarkers.sync.resolver").name, "ltcmarkers.sync.resolver")
        self.assertEqual(get_logger("ltcmarkersx").name, "ltcmarkers.ltcmarkersx")

    def test_log_file_gets_banner_and_parent_dirs(self):
        log_path = self.tmp / "logs" / "import.log"
        setup_logging(level="DEBUG", log_file=log_path, console=False)

        log_banner(get_logger("importer"), "Starting marker import", "CSV file: day1.csv")

        lines = log_path.read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 4)
        self.assertTrue(lines[0].endswith("INFO - " + "=" * 60))
        self.assertIn("ltcmarkers.importer - INFO - CSV file: day1.csv", lines[2])

    def test_reconfigure_replaces_handlers(self):
        setup_logging(log_file=self.tmp / "a.log")
        setup_logging(log_file=self.tmp / "b.log")

        package_logger = logging.getLogger(LOGGER_PREFIX)
        files = [h.baseFilename for h in package_logger.handlers if isinstance(h, logging.FileHandler)]
        self.assertEqual(files, [os.path.abspath(self.tmp / "b.log")])
        self.assertEqual(len(package_logger.handlers), len(log_module._installed_handlers))

    def test_quiet_logging_restores_level(self):
        setup_logging(level="WARNING", console=False)
        package_logger = logging.getLogger(LOGGER_PREFIX)

        with quiet_logging():
            self.assertFalse(package_logger.isEnabledFor(logging.CRITICAL))

        self.assertEqual(package_logger.level, logging.WARNING)
