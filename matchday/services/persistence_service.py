"""
Persistence service for the Matchday rotation manager.

Club data is stored through a small key-value interface so the storage
engine can be swapped without touching the services. Members and attendance
live under two separate keys.
"""
import json
import logging
import os
from typing import Any, Dict, Optional, Protocol, Sequence

from ..models import ClubState
from ..utils.constants import ATTENDANCE_KEY, MEMBERS_KEY

logger = logging.getLogger(__name__)


class StorageBackend(Protocol):
    """Key-value storage interface."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored text for a key, or None."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store text under a key."""
        ...


class InMemoryStorage:
    """Dictionary-backed storage, used by tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage:
    """
    Storage backed by a single JSON object on disk.

    The whole file is rewritten on every ``set``.
    """

    def __init__(self, file_path: str):
        self.file_path = file_path

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.file_path):
            return {}
        with open(self.file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self.file_path} does not contain a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value

        # Ensure directory exists
        directory = os.path.dirname(self.file_path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)

        with open(self.file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)


class PersistenceService:
    """
    Saves and loads the club state through a storage backend.
    """

    def __init__(self, storage: Optional[StorageBackend] = None,
                 initial_members: Optional[Sequence[Dict[str, Any]]] = None):
        """
        Initialize PersistenceService.

        Args:
            storage: Storage backend (in-memory when omitted)
            initial_members: Roster entries used while nothing has been
                saved under the members key yet
        """
        self.storage = storage if storage is not None else InMemoryStorage()
        self.initial_members = list(initial_members or [])

    def save_state(self, state: ClubState) -> None:
        """
        Write members and attendance to their storage keys.

        Raises:
            OSError: If the backend cannot be written
        """
        snapshot = state.to_json()
        self.storage.set(MEMBERS_KEY, json.dumps(snapshot["members"], ensure_ascii=False))
        self.storage.set(ATTENDANCE_KEY, json.dumps(snapshot["attendance"], ensure_ascii=False))
        logger.debug(
            "Saved %d members and %d attendance records",
            len(snapshot["members"]), len(snapshot["attendance"]),
        )

    def load_state(self) -> ClubState:
        """
        Read the club state; missing keys give an empty log and the initial
        roster.

        Raises:
            json.JSONDecodeError: If a stored value is not valid JSON
            KeyError: If a stored member or record lacks a required field
        """
        if self.storage.get(MEMBERS_KEY):
            members = self._load_list(MEMBERS_KEY)
        else:
            members = [dict(m) for m in self.initial_members]
            if members:
                logger.info("No saved roster, starting with %d initial members", len(members))
        return ClubState.from_json({
            "members": members,
            "attendance": self._load_list(ATTENDANCE_KEY),
        })

    def _load_list(self, key: str) -> list:
        raw = self.storage.get(key)
        if not raw:
            return []
        value: Any = json.loads(raw)
        if not isinstance(value, list):
            raise ValueError(f"Stored value for {key} is not a list")
        return value
