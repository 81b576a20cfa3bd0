"""
Submission History Store

Browser-style local storage backed by SQLite:
- One key-value table (local_storage), values are text
- The whole submission history lives under one key as a JSON array
- Every save overwrites the array wholesale (read-modify-write by the caller)

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import json
import sqlite3
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from calculators.tax_returns import SubmissionRecord
from services.submission_config import STORAGE_KEY
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


class SubmissionStore:
    """
    SQLite-based key-value storage for the submission history.

    Tables:
    - local_storage: key TEXT PRIMARY KEY, value TEXT, updated_at TIMESTAMP
    """

    def __init__(self, db_path: Union[str, Path] = "data/submissions.db", storage_key: str = STORAGE_KEY):
        """
        Initialize the store.

        Args:
            db_path: Path to SQLite database file
            storage_key: Key under which the history array is kept
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.storage_key = storage_key
        self._init_db()

    def _get_conn(self) -> sqlite3.Connection:
        """Get a configured database connection."""
        return sqlite3.connect(self.db_path, timeout=30.0)

    def _init_db(self):
        """Create the storage table if it doesn't exist."""
        with self._get_conn() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS local_storage (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
            conn.commit()
        logger.info(f"Initialized submission store at {self.db_path}")

    # ==================== Key-Value Methods ====================

    def get_item(self, key: str) -> Optional[str]:
        """Get the stored text for a key, or None."""
        with self._get_conn() as conn:
            row = conn.execute(
                "SELECT value FROM local_storage WHERE key = ?", (key,)
            ).fetchone()
        return row[0] if row else None

    def set_item(self, key: str, value: str):
        """Store text under a key, replacing any previous value."""
        with self._get_conn() as conn:
            conn.execute(
                """
                INSERT INTO local_storage (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP
                """,
                (key, value)
            )
            conn.commit()

    # ==================== History Methods ====================

    def save_history(self, history: List[SubmissionRecord]):
        """
        Persist the full history, overwriting what was stored.

        Raises:
            sqlite3.Error: If the write fails.
        """
        payload = json.dumps([record.to_storage() for record in history], allow_nan=False)
        self.set_item(self.storage_key, payload)
        logger.info(f"Saved {len(history)} submissions under '{self.storage_key}'")

    def load_history(self) -> List[SubmissionRecord]:
        """
        Load the stored history.

        A missing key yields an empty list. Unreadable JSON is logged and
        treated as empty; individual entries that are not valid records
        are skipped.
        """
        raw = self.get_item(self.storage_key)
        if not raw or not raw.strip():
            return []

        try:
            entries = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Stored history under '{self.storage_key}' is not valid JSON: {e}")
            return []

        if not isinstance(entries, list):
            logger.warning(f"Stored history under '{self.storage_key}' is not a list, ignoring")
            return []

        history: List[SubmissionRecord] = []
        for index, entry in enumerate(entries):
            try:
                history.append(SubmissionRecord.from_storage(entry))
            except ValidationError as e:
                logger.warning(f"Skipping invalid stored submission #{index}: {e.error_count()} errors")

        logger.info(f"Loaded {len(history)} submissions from '{self.storage_key}'")
        return history


_store_instances: Dict[str, SubmissionStore] = {}


def get_submission_store(db_path: Union[str, Path] = "data/submissions.db") -> SubmissionStore:
    """Get or create the shared store for a database path."""
    key = str(Path(db_path))
    if key not in _store_instances:
        _store_instances[key] = SubmissionStore(db_path)
    return _store_instances[key]
