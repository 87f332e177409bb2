#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from hive.config import DEFAULT_CONFIG, check_config, load_config
from hive.domain.errors import HiveError
from hive.perception.annotate import DISPLAY_MODES
from hive.pipeline.detect_bees import ERROR, detect_and_store
from hive.storage.hive_store import ensure_schema, open_store


def main(argv=None):
    ap = argparse.ArgumentParser(description="Detect bee regions on a hive photo and store them.")
    ap.add_argument("image")
    ap.add_argument("--config", default=str(DEFAULT_CONFIG))
    ap.add_argument("--db", default=None, help="SQLite file (overrides config)")
    ap.add_argument("--display", choices=DISPLAY_MODES, default=None)
    ap.add_argument("--out", default=None, help="annotated PNG for --display file")
    args = ap.parse_args(argv)

    try:
        cfg = load_config(args.config)
        if args.db:
            cfg.db_path = Path(args.db)
        if args.display:
            cfg.display = args.display
        if args.out:
            cfg.out_path = Path(args.out)
        check_config(cfg)
    except ValueError as e:
        ap.error(str(e))

    try:
        conn = open_store(cfg.db_path)
    except HiveError as e:
        print(f"[hive] {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    try:
        ensure_schema(conn)
        res = detect_and_store(args.image, conn, cfg)
    except HiveError as e:
        print(f"[hive] {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    finally:
        conn.close()

    if res.status == ERROR:
        return 1
    print(f"[hive] {res.status}: {len(res.row_ids)} rows -> {cfg.db_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
