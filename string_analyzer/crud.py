import logging
import threading
from typing import Dict, List

from string_analyzer.exceptions import DuplicateStringError, EmptyValueError, StringNotFoundError
from string_analyzer.models import AnalyzedRecord
from string_analyzer.utils import analyze_string

logger = logging.getLogger(__name__)


class StringStore:
    """
    In-memory collection of analyzed strings keyed by their trimmed value.
    Insertion order is kept so listings are deterministic.
    Records are copied in and out, so callers never hold the stored objects.
    """

    def __init__(self):
        self._records: Dict[str, AnalyzedRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, value: str) -> bool:
        return value in self._records

    def create(self, record: AnalyzedRecord) -> AnalyzedRecord:
        """Insert a record, failing if its value is already stored"""
        with self._lock:
            if record.value in self._records:
                raise DuplicateStringError()
            self._records[record.value] = record.model_copy(deep=True)
        return record

    def get(self, value: str) -> AnalyzedRecord:
        """Get string analysis by value"""
        record = self._records.get(value)
        if record is None:
            raise StringNotFoundError()
        return record.model_copy(deep=True)

    def list(self) -> List[AnalyzedRecord]:
        """Snapshot of all records in insertion order"""
        with self._lock:
            records = list(self._records.values())
        return [record.model_copy(deep=True) for record in records]

    def delete(self, value: str) -> None:
        """Delete string analysis by value"""
        with self._lock:
            if value not in self._records:
                raise StringNotFoundError()
            del self._records[value]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


def create_string_analysis(store: StringStore, raw_value: str) -> AnalyzedRecord:
    """Analyze a string and store the result"""
    record = analyze_string(raw_value)
    if not record.value:
        raise EmptyValueError()

    try:
        store.create(record)
    except DuplicateStringError:
        logger.info(f"Rejected duplicate string {record.value!r}")
        raise

    logger.info(f"Stored string analysis {record.id[:12]} (length={record.properties.length})")
    return record


def delete_string(store: StringStore, value: str) -> None:
    """Delete string analysis by value"""
    store.delete(value)
    logger.info(f"Deleted string {value!r}")
