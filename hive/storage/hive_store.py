#!/usr/bin/env python3
from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Iterable, List

from hive.domain.errors import InsertError, PreparedStatementError, SchemaError, StoreOpenError
from hive.domain.hive_region import HiveRegion

DEFAULT_DB_PATH = Path("hive_regions.sqlite")
TABLE = "hive_region"

CREATE_SQL = f"""
CREATE TABLE IF NOT EXISTS {TABLE} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT,
    location TEXT,
    bee_count INTEGER,
    placement_date DATE
)
"""

INSERT_SQL = f"INSERT INTO {TABLE} (name, location, bee_count, placement_date) VALUES (?, ?, ?, ?)"
SELECT_SQL = f"SELECT id, name, location, bee_count, placement_date FROM {TABLE} ORDER BY id"


def open_store(db_path=DEFAULT_DB_PATH) -> sqlite3.Connection:
    """Opens (and creates if absent) the SQLite file; fails fast on unusable paths."""
    try:
        conn = sqlite3.connect(str(db_path))
    except sqlite3.Error as e:
        raise StoreOpenError(f"cannot open database {db_path}: {e}") from e
    try:
        # sqlite opens lazily; touching the header surfaces corrupt files now
        conn.execute("PRAGMA schema_version").fetchone()
    except sqlite3.Error as e:
        conn.close()
        raise StoreOpenError(f"cannot open database {db_path}: {e}") from e
    return conn


def ensure_schema(conn: sqlite3.Connection) -> None:
    try:
        with conn:
            conn.execute(CREATE_SQL)
    except sqlite3.Error as e:
        raise SchemaError(f"cannot create table {TABLE}: {e}") from e


def table_exists(conn: sqlite3.Connection, name: str = TABLE) -> bool:
    row = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name=?", (name,)
    ).fetchone()
    return row is not None and row[0] == name


def _prepare_insert(conn: sqlite3.Connection) -> None:
    # EXPLAIN compiles the statement without running it
    try:
        conn.execute("EXPLAIN " + INSERT_SQL, (None, None, None, None)).fetchall()
    except sqlite3.Error as e:
        raise PreparedStatementError(f"cannot prepare INSERT: {e}") from e


def insert_regions(conn: sqlite3.Connection, regions: Iterable[HiveRegion]) -> List[int]:
    """
    Inserts one row per region in order, each committed on its own.
    A failing row raises InsertError; rows before it stay committed.
    Returns the new row ids.
    """
    _prepare_insert(conn)
    ids = []
    for i, r in enumerate(regions):
        try:
            with conn:
                cur = conn.execute(INSERT_SQL, (r.name, r.location, r.bee_count, r.placement_date))
        except sqlite3.Error as e:
            raise InsertError(i, str(e), ids) from e
        ids.append(cur.lastrowid)
    return ids


def fetch_regions(conn: sqlite3.Connection) -> List[HiveRegion]:
    rows = conn.execute(SELECT_SQL).fetchall()
    return [
        HiveRegion(id=rid, name=name, location=loc, bee_count=cnt, placement_date=date)
        for rid, name, loc, cnt, date in rows
    ]


def count_regions(conn: sqlite3.Connection) -> int:
    return conn.execute(f"SELECT COUNT(*) FROM {TABLE}").fetchone()[0]
