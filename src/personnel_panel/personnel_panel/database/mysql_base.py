from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import BackendError
from .connection import DatabaseConnection

# MySQL errno -> canonical (PostgreSQL-style) code understood by the error formatter.
MYSQL_ERRNO_CODES = {
    1062: "23505",  # duplicate entry
    1451: "23503",  # row is referenced by a foreign key
    1452: "23503",  # referenced row missing
    1044: "42501",  # access denied for database
    1045: "42501",  # access denied for user
    1142: "42501",  # command denied on table
}


def translate_mysql_error(error: mysql.connector.Error) -> BackendError:
    errno = getattr(error, "errno", None)
    code = MYSQL_ERRNO_CODES.get(errno) or getattr(error, "sqlstate", None) or (str(errno) if errno else None)
    message = getattr(error, "msg", None) or str(error)
    return BackendError(message, code=code, details={"errno": errno})


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise translate_mysql_error(e) from e
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise translate_mysql_error(e) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def placeholders(count: int) -> str:
    return ",".join(["%s"] * count)
