"""Configuration management for video-sxs."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Dict, Any

import yaml
from pydantic import BaseModel, Field, field_validator

from sxs.errors import MissingFlagError


logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = "INFO"
    log_to_file: bool = False
    log_directory: str = "logs"
    max_log_size_mb: int = 100
    backup_count: int = 5

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {v}")
        return level


class SxsConfig(BaseModel):
    """Root configuration for a side-by-side run.

    Field names match the command-line flags, so a YAML file and the CLI
    share one vocabulary.
    """

    input1: str = ""
    input2: str = ""
    input1_start_frame: int = 0
    input2_start_frame: int = 0
    adapt_first: bool = False  # resize video 1 to video 2 instead of the reverse
    output: str = ""
    fourcc_codec: str = "h264"

    preview: bool = True
    progress_interval: int = 30  # log progress every N frames, 0 = last only

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("progress_interval")
    @classmethod
    def validate_progress_interval(cls, v: int) -> int:
        if v < 0:
            raise ValueError("progress_interval must be >= 0")
        return v

    def require(self, name: str) -> str:
        """Return the string option *name*, which must be non-empty.

        Raises:
            MissingFlagError: if the option is empty.
        """
        value = getattr(self, name)
        if not value:
            raise MissingFlagError(f"Flag --{name} must be non-empty.")
        return value

    def setup_logging(self) -> None:
        """Configure logging based on config."""
        log_level = getattr(logging, self.logging.level)

        handlers = []

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        formatter = logging.Formatter(LOG_FORMAT)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

        if self.logging.log_to_file:
            log_dir = Path(self.logging.log_directory)
            log_dir.mkdir(exist_ok=True, parents=True)

            file_handler = RotatingFileHandler(
                log_dir / "sxs.log",
                maxBytes=self.logging.max_log_size_mb * 1024 * 1024,
                backupCount=self.logging.backup_count
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

        logging.basicConfig(
            level=log_level,
            handlers=handlers,
            force=True
        )

        logger.debug("Logging configured: level=%s", self.logging.level)


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> SxsConfig:
    """Load configuration from a YAML file with optional overrides.

    Args:
        config_path: Path to YAML config file. If None, only defaults and
            overrides are used.
        overrides: Dictionary of config overrides (nested keys with dots)

    Returns:
        Validated SxsConfig instance

    Example:
        >>> config = load_config("runs/compare.yaml")
        >>> config = load_config(overrides={"input2_start_frame": 10})
    """
    config_dict: Dict[str, Any] = {}
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            logger.info("Loading config from %s", path)
            with open(path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            logger.warning("Config file not found: %s, using defaults", path)

    if overrides:
        config_dict = _apply_overrides(config_dict, overrides)

    config = SxsConfig(**config_dict)
    config.setup_logging()

    return config


def _apply_overrides(
    config_dict: Dict[str, Any],
    overrides: Dict[str, Any]
) -> Dict[str, Any]:
    """Apply nested overrides to config dictionary.

    Example:
        overrides = {"logging.level": "DEBUG"}
        -> config_dict["logging"]["level"] = "DEBUG"
    """
    for key, value in overrides.items():
        keys = key.split(".")
        d = config_dict
        for k in keys[:-1]:
            d = d.setdefault(k, {})
        d[keys[-1]] = value
    return config_dict
