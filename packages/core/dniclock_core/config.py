"""Persistent clock settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1


@dataclass
class ClockConfig:
    show_seconds: bool = True


@dataclass
class WindowConfig:
    width: int | None = None
    height: int = 70
    margin: int = 10
    title: str = "D'ni Clock"


@dataclass
class FontsConfig:
    numeral_path: str | None = None
    ascii_path: str | None = None


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    clock: ClockConfig = field(default_factory=ClockConfig)
    window: WindowConfig = field(default_factory=WindowConfig)
    fonts: FontsConfig = field(default_factory=FontsConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "DniClock"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "DniClock"
    return Path.home() / ".config" / "dniclock"


def config_path() -> Path:
    return config_root() / "config.json"


def window_width(cfg: AppConfig) -> int:
    """Configured width, or room for H:MM (200) or H:MM:SS (300)."""
    if cfg.window.width is not None:
        return cfg.window.width
    return 300 if cfg.clock.show_seconds else 200


def line_height(cfg: AppConfig) -> int:
    return cfg.window.height - 2 * cfg.window.margin


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_window(cfg: AppConfig) -> None:
    cfg.window.margin = max(0, int(cfg.window.margin))
    cfg.window.height = max(2 * cfg.window.margin + 1, int(cfg.window.height))
    if cfg.window.width is not None:
        cfg.window.width = max(1, int(cfg.window.width))


def _normalize_clock(cfg: AppConfig) -> None:
    cfg.clock.show_seconds = bool(cfg.clock.show_seconds)
    cfg.diagnostics.keep_log_files = max(2, int(cfg.diagnostics.keep_log_files))


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        clock=_merge(ClockConfig, data.get("clock", {})),
        window=_merge(WindowConfig, data.get("window", {})),
        fonts=_merge(FontsConfig, data.get("fonts", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
    )

    _normalize_window(cfg)
    _normalize_clock(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
