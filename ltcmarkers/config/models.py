"""Configuration model for a marker import run.

The three values that decide an import's outcome are the CSV path and
the two optional sync overrides. The rest selects dry-run, reporting
and logging behaviour. Settings can be saved to and loaded from JSON.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from ltcmarkers.utils.constants import DEFAULT_DRY_RUN_FPS, DEFAULT_DRY_RUN_START_TC
from ltcmarkers.utils.exceptions import ConfigurationError
from ltcmarkers.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ImportConfig:
    """Settings for one import.

    Attributes:
        csv_path: Marker CSV exported by the recording device
        sync_ltc: LTC timecode at the sync point (None = detect Session Start)
        sync_timeline: Timeline timecode at the sync point (None = timeline start)
        dry_run: Import into an in-memory timeline instead of Resolve
        dry_run_fps: Frame rate of the dry-run timeline
        dry_run_start_tc: Start timecode of the dry-run timeline
        report_path: Optional .csv/.xlsx per-row report
        log_file: Optional log file
        verbose: Debug-level logging

    Example:
        >>> config = ImportConfig(csv_path="markers.csv", sync_ltc="14:30:00:00")
    """

    csv_path: str | None = None
    sync_ltc: str | None = None
    sync_timeline: str | None = None
    dry_run: bool = False
    dry_run_fps: float = DEFAULT_DRY_RUN_FPS
    dry_run_start_tc: str = DEFAULT_DRY_RUN_START_TC
    report_path: str | None = None
    log_file: str | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        """Treat blank override fields as not supplied."""
        for name in ("csv_path", "sync_ltc", "sync_timeline", "report_path", "log_file"):
            value = getattr(self, name)
            if value is not None:
                value = str(value).strip()
                setattr(self, name, value or None)

        try:
            self.dry_run_fps = float(self.dry_run_fps)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                "Frame rate must be a number", config_key="dry_run_fps", invalid_value=self.dry_run_fps
            ) from e

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.verbose else "INFO"

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return asdict(self)

    def to_json(self, filepath: str | Path) -> None:
        """Save configuration to a JSON file."""
        path = Path(filepath)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved configuration to {path}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ImportConfig":
        """Create configuration from a dictionary.

        Raises:
            ConfigurationError: If the dictionary contains unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                "Unknown configuration keys", config_key=", ".join(unknown)
            )
        return cls(**data)

    @classmethod
    def from_json(cls, filepath: str | Path) -> "ImportConfig":
        """Load configuration from a JSON file.

        Raises:
            ConfigurationError: If the file cannot be read or is not a JSON object
        """
        path = Path(filepath)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file ({e})", config_key="config", invalid_value=str(path)
            ) from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON ({e})", config_key="config", invalid_value=str(path)
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration file must contain a JSON object",
                config_key="config",
                invalid_value=str(path),
            )

        logger.info(f"Loaded configuration from {path}")
        return cls.from_dict(data)
