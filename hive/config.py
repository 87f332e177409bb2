#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from hive.domain.hive_region import DEFAULT_PLACEMENT_DATE
from hive.perception.annotate import DISPLAY_MODES
from hive.perception.hive_regions import BLACK, YELLOW, ColorBand
from hive.storage.hive_store import DEFAULT_DB_PATH

DEFAULT_CONFIG = Path("configs/perception/hive.yaml")


@dataclass
class HiveConfig:
    db_path: Path = DEFAULT_DB_PATH
    log_path: Path = Path("log.txt")
    placement_date: str = DEFAULT_PLACEMENT_DATE
    yellow: ColorBand = field(default_factory=lambda: YELLOW)
    black: ColorBand = field(default_factory=lambda: BLACK)
    display: str = "none"
    out_path: Optional[Path] = None  # annotated PNG for display == "file"


def _band(d: Optional[dict], default: ColorBand) -> ColorBand:
    if not d:
        return default
    lo = tuple(int(v) for v in d.get("lo", default.lo))
    hi = tuple(int(v) for v in d.get("hi", default.hi))
    if len(lo) != 3 or len(hi) != 3:
        raise ValueError(f"HSV band needs 3 values per bound, got lo={lo} hi={hi}")
    if not all(0 <= v <= 255 for v in lo + hi):
        raise ValueError(f"HSV bounds must be within 0..255, got lo={lo} hi={hi}")
    return ColorBand(lo=lo, hi=hi)


def check_config(cfg: HiveConfig) -> HiveConfig:
    """Rejects settings that would only fail after rows are stored."""
    if cfg.display not in DISPLAY_MODES:
        raise ValueError(f"display must be one of {DISPLAY_MODES}, got {cfg.display!r}")
    if cfg.display == "file" and cfg.out_path is None:
        raise ValueError("display 'file' needs out_path")
    return cfg


def config_from_dict(cfg: dict) -> HiveConfig:
    bands = cfg.get("bands") or {}
    out = cfg.get("out_path")
    return check_config(HiveConfig(
        db_path=Path(cfg.get("db_path", DEFAULT_DB_PATH)),
        log_path=Path(cfg.get("log_path", "log.txt")),
        placement_date=str(cfg.get("placement_date", DEFAULT_PLACEMENT_DATE)),
        yellow=_band(bands.get("yellow"), YELLOW),
        black=_band(bands.get("black"), BLACK),
        display=str(cfg.get("display", "none")),
        out_path=Path(out) if out else None,
    ))


def load_config(path=DEFAULT_CONFIG) -> HiveConfig:
    """Reads a YAML config; a missing file gives the built-in defaults."""
    path = Path(path)
    if not path.exists():
        return HiveConfig()
    with path.open() as f:
        return config_from_dict(yaml.safe_load(f) or {})
