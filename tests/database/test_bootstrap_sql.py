from src.fleet_crm.fleet_crm.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use
from src.fleet_crm.fleet_crm.database.mysql_base import as_bool, normalize_mysql_time

from datetime import time, timedelta


def test_splitter_keeps_semicolons_in_quotes_and_drops_comments():
    sql = "CREATE TABLE a (x VARCHAR(5) DEFAULT 'a;b'); -- note; here\nINSERT INTO a VALUES ('c');"

    assert list(_iter_sql_statements(sql)) == [
        "CREATE TABLE a (x VARCHAR(5) DEFAULT 'a;b')",
        "INSERT INTO a VALUES ('c')",
    ]


def test_strip_database_statements():
    sql = "CREATE DATABASE IF NOT EXISTS fleet_crm;\nUSE fleet_crm;\nCREATE TABLE t (id INT);"

    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]


def test_mysql_value_normalizers():
    assert normalize_mysql_time(timedelta(hours=9, minutes=30)) == time(9, 30)
    assert normalize_mysql_time("09:00:00") == time(9, 0)
    assert normalize_mysql_time(None) is None
    assert as_bool(1) is True
    assert as_bool(0) is False
    assert as_bool(None) is False
