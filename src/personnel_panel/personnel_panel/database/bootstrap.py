from __future__ import annotations

import re
import uuid
from pathlib import Path
from typing import Iterable, Sequence

from ..common.colors import pick_color
from ..core.constants import EMPLOYEES_TABLE
from .connection import DatabaseConnection, DBConfig

DEMO_EMPLOYEES: tuple[str, ...] = ("Ahmet Yılmaz", "Ayşe Demir", "Mehmet Kaya")


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql(cur, sql: str) -> None:
    for stmt in _iter_sql_statements(sql):
        cur.execute(stmt)


def _run_script(db_config: dict, path: str | Path) -> None:
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _run_script(db_config, schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _run_script(db_config, seed_path)


def ensure_demo_employees(db_config: dict, names: Sequence[str] = DEMO_EMPLOYEES) -> int:
    """Insert the demo employees that are missing; returns how many were added."""
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    added = 0
    try:
        cur = conn.cursor(dictionary=True)
        cur.execute(f"SELECT name, color FROM {EMPLOYEES_TABLE}")
        rows = cur.fetchall() or []
        existing = {r["name"] for r in rows}
        used_colors = [r["color"] for r in rows]

        for name in names:
            if name in existing:
                continue
            color = pick_color(used_colors)
            cur.execute(
                f"INSERT INTO {EMPLOYEES_TABLE}(id, name, color) VALUES(%s, %s, %s)",
                (str(uuid.uuid4()), name, color),
            )
            used_colors.append(color)
            added += 1

        conn.commit()
    finally:
        conn.close()
    return added


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
