"""Utilities for video-sxs."""

from sxs.utils.config import LoggingConfig, SxsConfig, load_config

__all__ = ["LoggingConfig", "SxsConfig", "load_config"]
