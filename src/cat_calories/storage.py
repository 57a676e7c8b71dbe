from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

WEIGHT_KEY = "catWeight"
LIFE_STAGE_KEY = "catLifestage"


@dataclass(frozen=True)
class SavedInputs:
    weight: str | None
    life_stage: str | None


def connect_db(db_path: str | Path) -> sqlite3.Connection:
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS preferences (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        )
        """
    )
    conn.commit()


class PreferenceStore:
    """Key-value store for the last entered inputs.

    Storage failures are logged and reported as "no saved value"; they never
    reach the caller.
    """

    def __init__(self, db_path: str | Path) -> None:
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        conn = connect_db(self.db_path)
        try:
            init_db(conn)
        except sqlite3.Error:
            conn.close()
            raise
        return conn

    def set(self, key: str, value: str) -> bool:
        try:
            conn = self._connect()
            try:
                conn.execute(
                    """
                    INSERT INTO preferences(key, value) VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value
                    """,
                    (key, value),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error:
            logger.exception("Failed to save %s to %s", key, self.db_path)
            return False
        return True

    def get(self, key: str) -> str | None:
        try:
            conn = self._connect()
            try:
                row = conn.execute("SELECT value FROM preferences WHERE key = ?", (key,)).fetchone()
            finally:
                conn.close()
        except sqlite3.Error:
            logger.exception("Failed to read %s from %s", key, self.db_path)
            return None
        return None if row is None else str(row["value"])


def save_user_data(store: PreferenceStore, weight: str | None, life_stage: str | None) -> None:
    if weight:
        store.set(WEIGHT_KEY, weight)
    if life_stage:
        store.set(LIFE_STAGE_KEY, life_stage)


def load_user_data(store: PreferenceStore) -> SavedInputs:
    return SavedInputs(weight=store.get(WEIGHT_KEY), life_stage=store.get(LIFE_STAGE_KEY))
