from __future__ import annotations

import mysql.connector
import pytest

from src.personnel_panel.personnel_panel.common.error_formatter import describe_backend_error
from src.personnel_panel.personnel_panel.core.exceptions import BackendError
from src.personnel_panel.personnel_panel.database.mysql_base import db_cursor, placeholders, translate_mysql_error


@pytest.mark.parametrize(
    "errno, expected_code",
    [(1062, "23505"), (1451, "23503"), (1452, "23503"), (1044, "42501"), (1045, "42501"), (1142, "42501")],
)
def test_known_errnos_map_to_canonical_codes(errno, expected_code):
    err = mysql.connector.Error(msg="driver text", errno=errno, sqlstate="23000")
    translated = translate_mysql_error(err)

    assert translated.code == expected_code
    assert translated.details == {"errno": errno}


def test_other_errors_keep_sqlstate_and_message():
    err = mysql.connector.Error(msg="Table 'x' doesn't exist", errno=1146, sqlstate="42S02")
    translated = translate_mysql_error(err)

    assert translated.code == "42S02"
    assert describe_backend_error(translated) == "Table 'x' doesn't exist"


class FakeCursor:
    def __init__(self, error=None):
        self._error = error
        self.closed = False

    def execute(self, sql, params=None):
        if self._error:
            raise self._error

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn):
        self._conn = conn

    def connect(self):
        return self._conn


def test_db_cursor_commits_on_success():
    conn = FakeConn(FakeCursor())
    with db_cursor(FakeFactory(conn)) as (_, cur):
        cur.execute("SELECT 1")

    assert conn.committed and conn.closed
    assert not conn.rolled_back


def test_db_cursor_translates_driver_errors_and_rolls_back():
    cursor = FakeCursor(mysql.connector.Error(msg="Duplicate entry", errno=1062, sqlstate="23000"))
    conn = FakeConn(cursor)

    with pytest.raises(BackendError) as exc:
        with db_cursor(FakeFactory(conn)) as (_, cur):
            cur.execute("INSERT ...")

    assert exc.value.code == "23505"
    assert describe_backend_error(exc.value) == "Bu kayıt zaten mevcut"
    assert conn.rolled_back and conn.closed and cursor.closed
    assert not conn.committed


def test_placeholders():
    assert placeholders(3) == "%s,%s,%s"
