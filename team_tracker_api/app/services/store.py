"""
In‑memory record storage shared by the people, project and task services.

``RecordStore`` keeps an ordered list of pydantic records and the id
generation rule: a new record gets ``max(existing ids) + 1``, or ``1``
when the collection is empty.  Because the rule looks only at the
records currently held, deleting the newest record and creating
another one hands out the same id again.

All list scans and mutations happen under a re‑entrant lock so the
store stays consistent when the server runs handlers on several
threads.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)

logger = logging.getLogger(__name__)


class RecordStore(Generic[RecordT]):
    """Ordered collection of records of one type.

    Subclasses set ``entity`` (used in log lines) and ``seed`` (records
    loaded by :meth:`reset`) and build their create/update operations
    on top of :meth:`_insert`, :meth:`_find` and :meth:`_remove`.
    """

    entity: str = "record"
    seed: Callable[[], Iterable[RecordT]] = staticmethod(lambda: ())

    def __init__(self, records: Optional[Iterable[RecordT]] = None) -> None:
        self._lock = threading.RLock()
        self._records: List[RecordT] = list(records or [])

    # ------------------------------------------------------------------
    # Collection helpers
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def all(self) -> List[RecordT]:
        """Return a snapshot of the records in insertion order."""
        with self._lock:
            return list(self._records)

    def next_id(self) -> int:
        """Id the next created record will receive."""
        with self._lock:
            return max((record.id for record in self._records), default=0) + 1

    def clear(self) -> None:
        with self._lock:
            self._records = []

    def reset(self) -> None:
        """Replace the contents with a fresh copy of the seed records."""
        with self._lock:
            self._records = list(self.seed())

    def _find(self, record_id: int) -> Optional[RecordT]:
        with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return record
            return None

    def _insert(self, build: Callable[[int], RecordT]) -> RecordT:
        """Build a record for the next id and append it atomically."""
        with self._lock:
            record = build(self.next_id())
            self._records.append(record)
        logger.info("Created %s %s", self.entity, record.id)
        return record

    def _remove(self, record_id: int) -> bool:
        with self._lock:
            remaining = [record for record in self._records if record.id != record_id]
            if len(remaining) == len(self._records):
                return False
            self._records = remaining
        logger.info("Deleted %s %s", self.entity, record_id)
        return True
