#!/usr/bin/env python3
"""
LTC CSV to Resolve Markers - CLI

Imports the event log of an on-set recording device (a CSV of LTC
timecodes) into the active DaVinci Resolve timeline as markers.

CSV FORMAT:
Required columns (any order, any case):
    timecode, label, color, note
Optional columns:
    TC IN, TC Out, Duration

The LTC sync point is taken from the first row whose note or label reads
"Session Start", unless --sync-ltc is given. Without --sync-timeline the
sync point lands on the first frame of the timeline and the timeline start
timecode is set to the LTC sync timecode.

USAGE:
    python ltc_markers_from_csv.py markers.csv [options]

For full help:
    python ltc_markers_from_csv.py --help
"""

import sys

from ltcmarkers.config.parser import ConfigParser
from ltcmarkers.config.validator import ConfigValidator
from ltcmarkers.host.memory_host import MemoryTimelineHost
from ltcmarkers.host.resolve_host import ResolveHost
from ltcmarkers.importer import MarkerImporter
from ltcmarkers.io.report_writer import ReportWriter
from ltcmarkers.utils.exceptions import LtcMarkersException
from ltcmarkers.utils.logger import get_logger, setup_logging


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 when every row was added, 1 otherwise)
    """
    parser = ConfigParser()

    try:
        config = parser.parse_args(argv)

        if not config.csv_path:
            print("\nError: csv_file is required", file=sys.stderr)
            parser.parser.print_help()
            return 1

        setup_logging(level=config.log_level, log_file=config.log_file, verbose=config.verbose)
        logger = get_logger(__name__)

        ConfigValidator.validate(config)

        if config.dry_run:
            logger.info("Dry run: markers are written to an in-memory timeline")
            host = MemoryTimelineHost(fps=config.dry_run_fps, start_timecode=config.dry_run_start_tc)
        else:
            host = ResolveHost()

        report = MarkerImporter(host).run(config.csv_path, config.sync_ltc, config.sync_timeline)

        if config.report_path:
            ReportWriter.write(report, config.report_path)

        print()
        print("=" * 80)
        print(report.summary())
        print("=" * 80)

        return 0 if report.added == report.total else 1

    except LtcMarkersException as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 1

    except Exception as e:
        print(f"\nCritical error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
