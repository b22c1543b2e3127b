from __future__ import annotations

import logging
from collections import Counter

from customer_cleaning.schema import RecordField
from customer_cleaning.store import RecordStore

logger = logging.getLogger(__name__)


class Deduplicator:
    """Keeps the first record seen for each key value, in store order."""

    def __init__(self, key_field: RecordField = RecordField.CUSTOMER_ID) -> None:
        self._key_field = key_field

    def duplicate_groups(self, store: RecordStore) -> int:
        counts = Counter(store.values(self._key_field.value))
        return sum(1 for count in counts.values() if count > 1)

    def duplicates_removed(self, store: RecordStore) -> int:
        return len(store) - len(set(store.values(self._key_field.value)))

    def apply(self, store: RecordStore) -> RecordStore:
        seen: set[object] = set()
        kept = []
        for record in store:
            key = getattr(record, self._key_field.value)
            if key in seen:
                continue
            seen.add(key)
            kept.append(record)

        removed = len(store) - len(kept)
        if removed:
            logger.info("Removed %d duplicate record(s) by %r", removed, self._key_field.value)
        return store.replace(kept)
