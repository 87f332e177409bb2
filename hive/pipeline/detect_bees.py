#!/usr/bin/env python3
from __future__ import annotations

import sqlite3
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from hive.config import HiveConfig
from hive.domain.errors import DisplayError, HiveError, InsertError, LogOpenError
from hive.domain.hive_region import HiveRegion
from hive.perception.annotate import present
from hive.perception.hive_regions import extract_regions
from hive.perception.summarize import summarize_regions
from hive.storage.hive_store import insert_regions

STORED = "stored"
NO_REGIONS = "no_regions"
ERROR = "error"


@dataclass
class DetectionResult:
    status: str  # STORED | NO_REGIONS | ERROR
    regions: List[HiveRegion] = field(default_factory=list)
    row_ids: List[int] = field(default_factory=list)
    n_black: int = 0
    # set with status ERROR, or with STORED when only the display step failed
    error: Optional[HiveError] = None

    @property
    def ok(self) -> bool:
        return self.status != ERROR


def _log(log, msg: str) -> None:
    log.write(f"{datetime.now().isoformat(timespec='seconds')} {msg}\n")


def _report(e: HiveError) -> None:
    print(f"[hive] {type(e).__name__}: {e}", file=sys.stderr)


def _open_log(path):
    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        return open(path, "a")
    except OSError as e:
        raise LogOpenError(f"cannot open log file {path}: {e}") from e


def detect_and_store(image_path, conn: sqlite3.Connection, cfg: HiveConfig) -> DetectionResult:
    """
    Runs extraction -> summary -> insert for one image, then hands the contours
    to the presentation layer. Pipeline failures come back as status "error";
    rows committed before a failing insert are listed in row_ids.
    """
    try:
        log = _open_log(cfg.log_path)
    except LogOpenError as e:
        _report(e)
        return DetectionResult(status=ERROR, error=e)

    regions: List[HiveRegion] = []
    with log:
        _log(log, f"detect {image_path}")
        try:
            ext = extract_regions(image_path, cfg.yellow, cfg.black)
            if not ext.found:
                print("[hive] no bees found")
                _log(log, f"no regions (yellow={len(ext.yellow)} black={len(ext.black)})")
                return DetectionResult(status=NO_REGIONS, n_black=len(ext.black))

            print(f"[hive] found bees: {len(ext.yellow)} yellow / {len(ext.black)} black regions")
            regions = summarize_regions(ext.yellow, cfg.placement_date)
            ids = insert_regions(conn, regions)
            _log(log, f"stored {len(ids)} regions")
        except InsertError as e:
            _report(e)
            _log(log, f"error {e.kind}: {e} ({len(e.row_ids)} rows kept)")
            return DetectionResult(
                status=ERROR, regions=regions[: len(e.row_ids)], row_ids=e.row_ids, error=e
            )
        except HiveError as e:
            _report(e)
            _log(log, f"error {e.kind}: {e}")
            return DetectionResult(status=ERROR, error=e)

    res = DetectionResult(status=STORED, regions=regions, row_ids=ids, n_black=len(ext.black))
    try:
        present(ext.image, ext.yellow, ext.black, mode=cfg.display, out_path=cfg.out_path)
    except DisplayError as e:
        # rows are already committed; the run still counts as stored
        _report(e)
        res.error = e
    return res
