"""JSON file-backed entity log."""

import json
import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, List, Optional, Type, TypeVar

from recordkeeper.config import get_settings
from recordkeeper.domain.errors import RecordError
from recordkeeper.infrastructure.record_codec import from_record, to_record

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PersistenceStatus(Enum):
    SAVED = "saved"
    LOADED = "loaded"
    NO_DATA = "no_data"
    IO_FAILURE = "io_failure"
    PARSE_FAILURE = "parse_failure"


@dataclass(frozen=True)
class PersistenceResult:
    """Outcome of a flush or reload; failures are reported here, not raised."""

    status: PersistenceStatus
    path: str
    message: str
    count: int = 0

    @property
    def ok(self) -> bool:
        return self.status in (PersistenceStatus.SAVED, PersistenceStatus.LOADED)


class PersistentLog(Generic[T]):
    """
    Ordered in-memory log of entities that can be saved to and reloaded from
    a JSON file.

    Appends stay in memory until flush() writes the whole log. reload()
    replaces the in-memory log only when the file parses completely.
    """

    def __init__(self, entity_type: Type[T], file_path: Optional[str] = None):
        """
        Initialize persistent log.

        Args:
            entity_type: Dataclass used to rebuild entities on reload
            file_path: JSON file path. If None, uses settings.
        """
        if file_path is None:
            file_path = get_settings().inventory_file

        self.entity_type = entity_type
        self.file_path = file_path
        self._log: List[T] = []

    def append(self, entity: T):
        self._log.append(entity)

    def list_all(self) -> List[T]:
        return list(self._log)

    def replace_all(self, entities: Iterable[T]):
        """Discard the in-memory log and take entities in their given order."""
        self._log = list(entities)

    def __len__(self) -> int:
        return len(self._log)

    def flush(self, path: Optional[str] = None) -> PersistenceResult:
        """
        Write the whole log to path, overwriting existing content.

        Args:
            path: Target file. If None, uses the log's file path.

        Returns:
            SAVED on success, IO_FAILURE otherwise
        """
        path = path or self.file_path
        try:
            # Encode fully before opening so a bad value cannot truncate the file
            payload = json.dumps(
                [to_record(entity) for entity in self._log],
                indent=2,
                ensure_ascii=False,
            )
            with open(path, "w", encoding="utf-8") as f:
                f.write(payload)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving file {path}: {e}")
            return PersistenceResult(
                PersistenceStatus.IO_FAILURE, path, f"Error saving file: {e}"
            )

        logger.info(f"Saved {len(self._log)} records to {path}")
        return PersistenceResult(
            PersistenceStatus.SAVED, path, f"Data saved to {path}", len(self._log)
        )

    def reload(self, path: Optional[str] = None) -> PersistenceResult:
        """
        Replace the in-memory log with the contents of path.

        A missing file is not an error: the log is left untouched and NO_DATA
        is returned. Unreadable or malformed files also leave the log
        untouched.

        Args:
            path: Source file. If None, uses the log's file path.

        Returns:
            LOADED, NO_DATA, IO_FAILURE or PARSE_FAILURE
        """
        path = path or self.file_path
        if not os.path.exists(path):
            logger.warning(f"No saved data found at {path}")
            return PersistenceResult(
                PersistenceStatus.NO_DATA, path, "No saved data found."
            )

        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as e:
            logger.error(f"Error loading file {path}: {e}")
            return PersistenceResult(
                PersistenceStatus.IO_FAILURE, path, f"Error loading file: {e}"
            )

        try:
            # Undecodable bytes count as malformed content
            data = json.loads(raw.decode("utf-8"))
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            entities = [from_record(self.entity_type, record) for record in data]
        except (ValueError, RecursionError, RecordError) as e:
            logger.error(f"Error parsing file {path}: {e}")
            return PersistenceResult(
                PersistenceStatus.PARSE_FAILURE, path, f"Error loading file: {e}"
            )

        self.replace_all(entities)
        logger.info(f"Loaded {len(entities)} records from {path}")
        return PersistenceResult(
            PersistenceStatus.LOADED, path, f"Data loaded from {path}", len(entities)
        )
