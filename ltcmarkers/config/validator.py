"""Configuration validation utilities."""

from pathlib import Path

from ltcmarkers.config.models import ImportConfig
from ltcmarkers.timing.converter import is_timecode
from ltcmarkers.utils.constants import REPORT_SUFFIXES
from ltcmarkers.utils.exceptions import ConfigurationError
from ltcmarkers.utils.logger import get_logger

logger = get_logger(__name__)


class ConfigValidator:
    """Validator for ImportConfig.

    Example:
        >>> ConfigValidator.validate(ImportConfig(csv_path="markers.csv"))
        >>> # Raises ConfigurationError if invalid
    """

    @classmethod
    def validate(cls, config: ImportConfig) -> None:
        """Validate the whole configuration.

        Raises:
            ConfigurationError: If any setting is invalid
        """
        cls.validate_input_file(config.csv_path)
        cls.validate_sync(config)
        cls.validate_dry_run(config)
        cls.validate_report_path(config.report_path)

    @classmethod
    def validate_input_file(cls, csv_path: str | None) -> None:
        if not csv_path:
            raise ConfigurationError("A CSV file is required", config_key="csv_path")

        path = Path(csv_path)
        if not path.exists():
            raise ConfigurationError(
                "CSV file not found", config_key="csv_path", invalid_value=csv_path
            )
        if not path.is_file():
            raise ConfigurationError(
                "CSV path is not a file", config_key="csv_path", invalid_value=csv_path
            )
        if path.suffix.lower() != ".csv":
            logger.warning(f"Input file does not have a .csv extension: {path.name}")

    @classmethod
    def validate_sync(cls, config: ImportConfig) -> None:
        """Manual sync timecodes must be HH:MM:SS:FF when given."""
        for key in ("sync_ltc", "sync_timeline"):
            value = getattr(config, key)
            if value is not None and not is_timecode(value):
                raise ConfigurationError(
                    "Sync timecode must be HH:MM:SS:FF", config_key=key, invalid_value=value
                )

        if config.sync_timeline and not config.sync_ltc:
            logger.info("Timeline sync TC given without LTC sync TC; LTC will be auto-detected")

    @classmethod
    def validate_dry_run(cls, config: ImportConfig) -> None:
        if not config.dry_run:
            return

        if config.dry_run_fps <= 0:
            raise ConfigurationError(
                "Frame rate must be positive", config_key="dry_run_fps", invalid_value=config.dry_run_fps
            )
        if not is_timecode(config.dry_run_start_tc):
            raise ConfigurationError(
                "Start timecode must be HH:MM:SS:FF",
                config_key="dry_run_start_tc",
                invalid_value=config.dry_run_start_tc,
            )

    @classmethod
    def validate_report_path(cls, report_path: str | None) -> None:
        if report_path is None:
            return

        if Path(report_path).suffix.lower() not in REPORT_SUFFIXES:
            raise ConfigurationError(
                f"Report must be one of {', '.join(REPORT_SUFFIXES)}",
                config_key="report_path",
                invalid_value=report_path,
            )
