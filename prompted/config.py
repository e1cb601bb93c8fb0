"""
Configuration helpers for the prompted command line and demos.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

DEFAULT_DEMO_CONFIG = Path(__file__).resolve().parent / "demo_config.yaml"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

COLOR_MODES = ("auto", "always", "never")


def _resolve_path(raw: str) -> Path:
    """Resolves a potentially relative path against the working directory."""
    candidate = Path(raw).expanduser()
    if candidate.is_absolute():
        return candidate
    return (Path.cwd() / candidate).resolve()


@dataclass
class PromptSettings:
    """Settings object populated from environment variables."""

    encoding: str = "utf-8"
    log_level: str = "WARNING"
    color: str = "auto"
    demo_config_path: Optional[Path] = None

    @classmethod
    def load(cls) -> "PromptSettings":
        load_dotenv()

        encoding = (os.getenv("PROMPTED_ENCODING", "utf-8") or "utf-8").strip()
        log_level = (os.getenv("PROMPTED_LOG_LEVEL", "WARNING") or "WARNING").strip().upper()
        color = (os.getenv("PROMPTED_COLOR", "auto") or "auto").strip().lower()
        if color not in COLOR_MODES:
            raise ValueError(f"PROMPTED_COLOR must be one of {', '.join(COLOR_MODES)}, got {color!r}")
        demo_config_raw = os.getenv("PROMPTED_DEMO_CONFIG", "").strip()
        demo_config_path = _resolve_path(demo_config_raw) if demo_config_raw else None

        return cls(
            encoding=encoding,
            log_level=log_level,
            color=color,
            demo_config_path=demo_config_path,
        )

    def use_color(self, stream: Any = None) -> bool:
        if self.color == "always":
            return True
        if self.color == "never":
            return False
        stream = stream if stream is not None else sys.stdout
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Demo config must be a mapping: {path}")
    return data


def load_demo_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the bundled demo settings, overlaid with ``path`` if given."""
    config = _read_yaml(DEFAULT_DEMO_CONFIG)
    if path is None:
        return config
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Demo config not found: {path}")
    return _merge(config, _read_yaml(path))


def configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT, stream=sys.stderr)


__all__ = [
    "COLOR_MODES",
    "DEFAULT_DEMO_CONFIG",
    "PromptSettings",
    "configure_logging",
    "load_demo_config",
]
