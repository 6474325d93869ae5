import logging
import threading
from typing import Dict, List, Optional

from fastapi import Request

from string_analyzer.errors import DuplicateError, NotFoundError
from string_analyzer.models import StringRecord
from string_analyzer.utils import compute_sha256

logger = logging.getLogger(__name__)


class ContentStore:
    """
    In-memory mapping from content hash to StringRecord.

    Writes and snapshots go through a single lock so the duplicate check and
    the insert happen atomically. Iteration follows insertion order.
    """

    def __init__(self):
        self._records: Dict[str, StringRecord] = {}
        self._lock = threading.RLock()

    def insert(self, record: StringRecord) -> None:
        with self._lock:
            if record.id in self._records:
                raise DuplicateError()
            self._records[record.id] = record
        logger.debug(f"Stored record {record.id}")

    def get(self, string_id: str) -> Optional[StringRecord]:
        return self._records.get(string_id)

    def get_by_value(self, value: str) -> Optional[StringRecord]:
        return self.get(compute_sha256(value))

    def delete(self, string_id: str) -> None:
        with self._lock:
            if string_id not in self._records:
                raise NotFoundError()
            del self._records[string_id]
        logger.debug(f"Removed record {string_id}")

    def list_all(self) -> List[StringRecord]:
        with self._lock:
            return list(self._records.values())

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, string_id: str) -> bool:
        return string_id in self._records


def get_store(request: Request) -> ContentStore:
    """Dependency to provide the application's store."""
    return request.app.state.store
