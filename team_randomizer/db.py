import sqlite3 as sql
from typing import Optional

def truncate_storage(conn: sql.Connection) -> None:
  """Truncate the key-value storage table."""
  conn.execute("DROP TABLE IF EXISTS storage")
  conn.execute("CREATE TABLE storage (key TEXT PRIMARY KEY, value BLOB)")
  conn.commit()

def ensure_storage(conn: sql.Connection) -> None:
  """Create the key-value storage table if it does not exist yet."""
  conn.execute("CREATE TABLE IF NOT EXISTS storage (key TEXT PRIMARY KEY, value BLOB)")
  conn.commit()

def get_item(conn: sql.Connection, key: str) -> Optional[object]:
  row = conn.execute("SELECT value FROM storage WHERE key = ?", (key,)).fetchone()
  if row is None:
    return None
  value = row[0]
  if isinstance(value, str):
    return value.encode("utf-8")
  return value

def set_item(conn: sql.Connection, key: str, value: bytes) -> None:
  conn.execute(
    """INSERT INTO storage (key, value) VALUES (?, ?)
    ON CONFLICT(key) DO UPDATE
    SET value = excluded.value""",
    (key, sql.Binary(value))
  )
  conn.commit()

def keys(conn: sql.Connection) -> list[str]:
  return [row[0] for row in conn.execute("SELECT key FROM storage ORDER BY key").fetchall()]
