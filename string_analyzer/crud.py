import logging
from typing import List, Optional

from string_analyzer.errors import NotFoundError
from string_analyzer.filters import FilterSet, apply_filters
from string_analyzer.models import StringRecord
from string_analyzer.store import ContentStore
from string_analyzer.utils import analyze_string, compute_sha256

logger = logging.getLogger(__name__)


def create_string_analysis(store: ContentStore, value: str) -> StringRecord:
    """Analyze a string and store it. Raises DuplicateError if already present"""
    properties = analyze_string(value)
    record = StringRecord(
        id=properties.sha256_hash,
        value=value,
        properties=properties,
    )

    store.insert(record)
    logger.info(f"Created string analysis {record.id}")
    return record


def get_string_by_value(store: ContentStore, value: str) -> Optional[StringRecord]:
    """Get string analysis by value"""
    return store.get_by_value(value)


def get_all_strings(store: ContentStore, filters: Optional[FilterSet] = None) -> List[StringRecord]:
    """Get all strings with optional filters"""
    records = store.list_all()
    if filters is None:
        return records
    return apply_filters(records, filters)


def delete_string(store: ContentStore, value: str) -> None:
    """Delete string analysis by value. Raises NotFoundError if absent"""
    string_id = compute_sha256(value)
    try:
        store.delete(string_id)
    except NotFoundError:
        logger.info(f"Delete requested for unknown string {string_id}")
        raise
    logger.info(f"Deleted string analysis {string_id}")
