"""
Progress snapshot persistence.

The core only needs load_progress() and save_progress(); where the snapshot
lives is up to the store:

- JsonProgressStore: a JSON file (default ~/.codelearner/progress.json)
- SqlProgressStore: a JSON document in one row, via SQLAlchemy

Both are best effort. An unreadable or corrupt snapshot loads as the default
snapshot, and a failed save is logged and dropped; neither raises.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from loguru import logger
from pydantic import ValidationError
from sqlalchemy import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from config import Settings
from src.core.models import UserProgress
from src.db.database import make_engine, make_session_factory, session_scope
from src.db.models import ProgressSnapshotRow


class ProgressStore(Protocol):
    """Load/save boundary for the single progress snapshot."""

    def load_progress(self) -> UserProgress:
        """Return the stored snapshot, or a default one."""
        ...

    def save_progress(self, progress: UserProgress) -> None:
        """Persist the snapshot (best effort)."""
        ...


def serialize_progress(progress: UserProgress) -> dict:
    """JSON-ready dict with camelCase keys."""
    return progress.model_dump(mode="json", by_alias=True)


def deserialize_progress(data: object) -> UserProgress:
    """
    Build a snapshot from decoded JSON.

    Keys missing from older snapshots take their default values.

    Raises:
        ValidationError: if the data is not a valid snapshot
    """
    return UserProgress.model_validate(data)


class JsonProgressStore:
    """Snapshot stored as a JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load_progress(self) -> UserProgress:
        if not self.path.exists():
            return UserProgress()

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            return deserialize_progress(data)
        # ValueError covers UnicodeDecodeError, JSONDecodeError and ValidationError
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load progress from {self.path}, starting fresh: {e}")
            return UserProgress()

    def save_progress(self, progress: UserProgress) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(serialize_progress(progress), f, indent=2)
        except OSError as e:
            logger.warning(f"Could not save progress to {self.path}: {e}")


class SqlProgressStore:
    """Snapshot stored as a JSON payload in the progress_snapshots table."""

    def __init__(self, database_url: str, key: str = "codelearner-progress"):
        self.database_url = database_url
        self.key = key
        self._session_factory: sessionmaker[Session] | None = None

    def _sessions(self) -> sessionmaker[Session]:
        if self._session_factory is None:
            url = make_url(self.database_url)
            if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)
            self._session_factory = make_session_factory(make_engine(self.database_url))
        return self._session_factory

    def load_progress(self) -> UserProgress:
        try:
            with session_scope(self._sessions()) as session:
                row = session.get(ProgressSnapshotRow, self.key)
                payload = row.payload if row is not None else None
        except (OSError, ImportError, SQLAlchemyError) as e:
            logger.warning(f"Could not load progress '{self.key}', starting fresh: {e}")
            return UserProgress()

        if payload is None:
            return UserProgress()
        try:
            return deserialize_progress(payload)
        except ValidationError as e:
            logger.warning(f"Stored progress '{self.key}' is invalid, starting fresh: {e}")
            return UserProgress()

    def save_progress(self, progress: UserProgress) -> None:
        try:
            with session_scope(self._sessions()) as session:
                session.merge(ProgressSnapshotRow(key=self.key, payload=serialize_progress(progress)))
        except (OSError, ImportError, SQLAlchemyError) as e:
            logger.warning(f"Could not save progress '{self.key}': {e}")


def create_progress_store(settings: Settings) -> ProgressStore:
    """Store selected by settings.progress_backend."""
    if settings.progress_backend == "sql":
        return SqlProgressStore(settings.database_url, settings.progress_key)
    return JsonProgressStore(settings.progress_path)
