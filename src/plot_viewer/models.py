"""Dataclasses describing configuration for plot_viewer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .utils.geometry import Point2D, Rect, Size2D

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PLOT_VIEWER_CONFIG"


class ConfigurationError(ValueError):
    """Raised when plot limits cannot describe a valid zoom range."""


def _default_max_window() -> Rect:
    return Rect(Point2D(0.0, -1.0), Size2D(2.0, 2.0))


def _default_min_window_size() -> Size2D:
    return Size2D(0.01, 0.01)


@dataclass(frozen=True)
class PlotLimits:
    """Bounds of the plot plane and the smallest window a zoom may reach."""

    max_window: Rect = field(default_factory=_default_max_window)
    min_window_size: Size2D = field(default_factory=_default_min_window_size)

    def validate(self) -> None:
        max_size = self.max_window.size
        if not max_size.is_positive():
            raise ConfigurationError(
                f"max_window must have a positive size, got {max_size}"
            )
        if not self.min_window_size.is_positive():
            raise ConfigurationError(
                f"min_window_size must be positive, got {self.min_window_size}"
            )
        if (
            self.min_window_size.width > max_size.width
            or self.min_window_size.height > max_size.height
        ):
            raise ConfigurationError(
                f"min_window_size {self.min_window_size} exceeds max_window "
                f"size {max_size}"
            )


@dataclass
class PlotStyle:
    """Presentation preferences for the plot view."""

    line_width: float = 1.0
    stroke_color: str = "#00ff00"
    background_color: str = "#000000"
    label_precision: int = 4


@dataclass
class AppConfig:
    """Configuration loaded at start-up. The visible window is never stored."""

    limits: PlotLimits = field(default_factory=PlotLimits)
    style: PlotStyle = field(default_factory=PlotStyle)

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "AppConfig":
        data: Dict[str, Any] = json.loads(text)
        lim = data.get("limits", {})
        sty = data.get("style", {})
        defaults = PlotLimits()
        return AppConfig(
            limits=PlotLimits(
                max_window=_rect_from_dict(lim.get("max_window"), defaults.max_window),
                min_window_size=_size_from_dict(
                    lim.get("min_window_size"), defaults.min_window_size
                ),
            ),
            style=PlotStyle(
                line_width=float(sty.get("line_width", 1.0)),
                stroke_color=str(sty.get("stroke_color", "#00ff00")),
                background_color=str(sty.get("background_color", "#000000")),
                label_precision=int(sty.get("label_precision", 4)),
            ),
        )


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".plot_viewer_config.json"


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Read the configuration file, falling back to defaults when unusable."""
    p = path if path is not None else config_path()
    if not p.exists():
        return AppConfig()
    try:
        cfg = AppConfig.from_json(p.read_text(encoding="utf-8"))
        cfg.limits.validate()
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring config file %s: %s", p, exc)
        return AppConfig()
    return cfg


def _size_from_dict(data: Dict[str, Any] | None, default: Size2D) -> Size2D:
    if not data:
        return default
    return Size2D(
        width=float(data.get("width", default.width)),
        height=float(data.get("height", default.height)),
    )


def _rect_from_dict(data: Dict[str, Any] | None, default: Rect) -> Rect:
    if not data:
        return default
    origin = data.get("origin") or {}
    return Rect(
        origin=Point2D(
            x=float(origin.get("x", default.origin.x)),
            y=float(origin.get("y", default.origin.y)),
        ),
        size=_size_from_dict(data.get("size"), default.size),
    )


__all__ = [
    "ConfigurationError",
    "PlotLimits",
    "PlotStyle",
    "AppConfig",
    "config_path",
    "load_config",
]
