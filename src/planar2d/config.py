"""Dataclasses describing the persisted command line configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import json
import os
from pathlib import Path
from typing import Dict, Optional

from .logging_utils import get_logger
from .vector import EPS

logger = get_logger(__name__)

CONFIG_ENV_VAR = "PLANAR2D_CONFIG"
CONFIG_FILENAME = ".planar2d_config.json"


@dataclass
class ToleranceParams:
    """Resolution used by the comparison commands."""

    eps: float = EPS


@dataclass
class DisplayParams:
    """How angles and numbers are read and printed."""

    degrees: bool = True
    precision: int = 6


@dataclass
class AppConfig:
    """Persisted configuration for the planar2d command line."""

    tolerance: ToleranceParams = field(default_factory=ToleranceParams)
    display: DisplayParams = field(default_factory=DisplayParams)

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "AppConfig":
        data: Dict = json.loads(text)
        t = data.get("tolerance", {})
        d = data.get("display", {})
        eps = float(t.get("eps", EPS))
        if eps < 0:
            raise ValueError(f"tolerance.eps must be non-negative, got {eps!r}")
        degrees = d.get("degrees", True)
        if not isinstance(degrees, bool):
            raise TypeError(f"display.degrees must be a boolean, got {degrees!r}")
        precision = d.get("precision", 6)
        if isinstance(precision, bool) or not isinstance(precision, int):
            raise TypeError(f"display.precision must be an integer, got {precision!r}")
        if precision < 0:
            raise ValueError(
                f"display.precision must be non-negative, got {precision!r}"
            )
        return AppConfig(
            tolerance=ToleranceParams(eps=eps),
            display=DisplayParams(degrees=degrees, precision=precision),
        )


def config_path() -> Path:
    """Location of the config file, honouring ``$PLANAR2D_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Read the config file, falling back to defaults when it is unusable."""
    p = path if path is not None else config_path()
    if not p.exists():
        logger.debug("No config file at %s, using defaults.", p)
        return AppConfig()
    try:
        cfg = AppConfig.from_json(p.read_text(encoding="utf-8"))
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable config file %s: %s", p, exc)
        return AppConfig()
    logger.info("Loaded config from %s", p)
    return cfg


def save_config(cfg: AppConfig, path: Optional[Path] = None) -> Path:
    """Write ``cfg`` as JSON and return the path written to."""
    p = path if path is not None else config_path()
    p.write_text(cfg.to_json(), encoding="utf-8")
    logger.info("Saved config to %s", p)
    return p


__all__ = [
    "ToleranceParams",
    "DisplayParams",
    "AppConfig",
    "config_path",
    "load_config",
    "save_config",
]
