from __future__ import annotations

import logging
import re
from importlib.resources import files
from pathlib import Path
from typing import Any, Iterable, Optional

import mysql.connector
from werkzeug.security import generate_password_hash

from .connection import DBConfig

logger = logging.getLogger(__name__)

def bundled_sql(name: str):
    """SQL file shipped inside the package (schema.sql, seed.sql)."""
    return files("worktime") / "database" / name


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


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _run_sql_file(db_config: dict, source: Any) -> int:
    """Run every statement of a SQL file (a path or a package resource)."""
    target = DBConfig.from_dict(db_config)
    if isinstance(source, str):
        source = Path(source)
    sql = _strip_create_db_and_use(source.read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        count = 0
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
        return count
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: Optional[Any] = None) -> None:
    source = schema_path or bundled_sql("schema.sql")
    ensure_database_exists(db_config)
    count = _run_sql_file(db_config, source)
    logger.info("Applied %s (%d statements)", getattr(source, "name", source), count)


def apply_seed_sql(db_config: dict, *, seed_path: Optional[Any] = None) -> None:
    source = seed_path or bundled_sql("seed.sql")
    count = _run_sql_file(db_config, source)
    logger.info("Applied %s (%d statements)", getattr(source, "name", source), count)


def ensure_admin_user(db_config: dict, *, username: str, password: str) -> None:
    """Create the login account, or reset its password if it already exists."""
    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor(dictionary=True)
        password_hash = generate_password_hash(password)

        cur.execute("SELECT user_id FROM users WHERE username=%s", (username,))
        if cur.fetchone():
            cur.execute("UPDATE users SET password_hash=%s WHERE username=%s", (password_hash, username))
            logger.info("Admin user %s already exists, password refreshed", username)
        else:
            cur.execute("INSERT INTO users (username, password_hash) VALUES (%s, %s)", (username, password_hash))
            logger.info("Admin user %s created", username)

        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
