"""Roster snapshot persistence on top of the key-value store."""

import logging
import sqlite3 as sql
from typing import Iterable, List, Optional

from . import db
from .validators import decode_snapshot, encode_snapshot

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "soccer_members"


class PersistenceBridge:
    """Loads and saves roster snapshots under a fixed storage key.

    Saving is best effort: storage errors are logged and swallowed. Loading
    never raises for corrupt data; an unreadable snapshot counts as absent.
    """

    def __init__(self, conn: sql.Connection, key: str = DEFAULT_STORAGE_KEY):
        """Initialize the bridge.

        Args:
            conn: Open connection to the key-value store
            key: Storage key the snapshot lives under
        """
        self.conn = conn
        self.key = key

    def load_snapshot(self) -> Optional[List[str]]:
        """Return the saved snapshot, or None if absent or unparsable."""
        try:
            db.ensure_storage(self.conn)
            payload = db.get_item(self.conn, self.key)
        except sql.Error:
            logger.warning("Could not read roster snapshot %r", self.key, exc_info=True)
            return None

        names = decode_snapshot(payload)
        if names is None and payload is not None:
            logger.warning("Ignoring unparsable roster snapshot %r", self.key)
        return names

    def save_snapshot(self, names: Iterable[str]) -> None:
        try:
            db.ensure_storage(self.conn)
            db.set_item(self.conn, self.key, encode_snapshot(names))
        except (sql.Error, OSError):
            logger.warning("Could not save roster snapshot %r", self.key, exc_info=True)

