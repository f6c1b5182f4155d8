"""Core app services for settings, logging, and the clock face."""

from .clock import ClockFace, FaceLayout, local_now, truncate
from .config import AppConfig, config_path, line_height, load_config, save_config, window_width

__all__ = [
    "AppConfig",
    "ClockFace",
    "FaceLayout",
    "config_path",
    "line_height",
    "load_config",
    "local_now",
    "save_config",
    "truncate",
    "window_width",
]
