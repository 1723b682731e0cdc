"""Command-line argument parser for the marker importer.

Converts command-line arguments, optionally layered over a JSON
configuration file, into an ImportConfig.
"""

import argparse

from ltcmarkers.config.models import ImportConfig
from ltcmarkers.utils.constants import DEFAULT_DRY_RUN_FPS, DEFAULT_DRY_RUN_START_TC
from ltcmarkers.utils.logger import get_logger

logger = get_logger(__name__)


class ConfigParser:
    """Parser for command-line arguments.

    Values from --config are used as defaults; flags given on the command
    line win.

    Example:
        >>> parser = ConfigParser()
        >>> config = parser.parse_args(["markers.csv", "--sync-ltc", "14:30:00:00"])
    """

    def __init__(self) -> None:
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            description="Import markers from an LTC-stamped CSV into the active DaVinci Resolve timeline.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_epilog(),
        )

        parser.add_argument("csv_file", nargs="?", help="Marker CSV file")

        parser.add_argument(
            "--config",
            type=str,
            help="Load settings from JSON configuration file",
        )

        sync_group = parser.add_argument_group("Sync")
        sync_group.add_argument(
            "--sync-ltc",
            default=None,
            help="LTC timecode at the sync point (default: detect 'Session Start' row)",
        )
        sync_group.add_argument(
            "--sync-timeline",
            default=None,
            help="Timeline timecode at the sync point (default: timeline start, "
                 "and the timeline start TC is set to the LTC sync TC)",
        )

        dry_group = parser.add_argument_group("Dry Run")
        dry_group.add_argument(
            "--dry-run",
            action="store_true",
            help="Import into an in-memory timeline instead of Resolve",
        )
        dry_group.add_argument(
            "--fps",
            type=float,
            default=None,
            help=f"Dry-run timeline frame rate (default: {DEFAULT_DRY_RUN_FPS:g})",
        )
        dry_group.add_argument(
            "--start-tc",
            default=None,
            help=f"Dry-run timeline start timecode (default: {DEFAULT_DRY_RUN_START_TC})",
        )

        output_group = parser.add_argument_group("Output")
        output_group.add_argument(
            "--report",
            default=None,
            help="Write a per-row report (.csv or .xlsx)",
        )
        output_group.add_argument(
            "--log-file",
            default=None,
            help="Also write the log to this file",
        )
        output_group.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose logging",
        )

        return parser

    def _get_epilog(self) -> str:
        return """
CSV FORMAT:
  Required columns: timecode, label, color, note
  Optional columns: TC IN, TC Out, Duration

EXAMPLES:
  Detect the sync point from a 'Session Start' row:
    python ltc_markers_from_csv.py markers.csv

  Manual sync:
    python ltc_markers_from_csv.py markers.csv --sync-ltc 14:32:00:00 --sync-timeline 01:00:05:12

  Check a CSV without Resolve and export a report:
    python ltc_markers_from_csv.py markers.csv --dry-run --fps 25 --report report.xlsx
"""

    def parse_args(self, args: list[str] | None = None) -> ImportConfig:
        """Parse command-line arguments.

        Args:
            args: Arguments to parse (None = use sys.argv)

        Returns:
            ImportConfig with file settings overridden by flags
        """
        parsed = self.parser.parse_args(args)

        if parsed.config:
            logger.info(f"Loading configuration from {parsed.config}")
            config = ImportConfig.from_json(parsed.config)
        else:
            config = ImportConfig()

        self._apply_args_to_config(config, parsed)
        return config

    def _apply_args_to_config(self, config: ImportConfig, args: argparse.Namespace) -> None:
        if args.csv_file is not None:
            config.csv_path = args.csv_file
        if args.sync_ltc is not None:
            config.sync_ltc = args.sync_ltc
        if args.sync_timeline is not None:
            config.sync_timeline = args.sync_timeline
        if args.fps is not None:
            config.dry_run_fps = args.fps
        if args.start_tc is not None:
            config.dry_run_start_tc = args.start_tc
        if args.report is not None:
            config.report_path = args.report
        if args.log_file is not None:
            config.log_file = args.log_file

        config.dry_run = config.dry_run or args.dry_run
        config.verbose = config.verbose or args.verbose

        # Re-run normalization so blank flags count as not supplied
        config.__post_init__()
