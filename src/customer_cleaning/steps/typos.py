from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace

from customer_cleaning.schema import RecordField
from customer_cleaning.store import RecordStore

logger = logging.getLogger(__name__)


class TypoCorrector:
    """Exact, case-sensitive lookup of known misspellings on a single field."""

    def __init__(
        self,
        corrections: Mapping[str, str] | None = None,
        field: RecordField = RecordField.NAME,
    ) -> None:
        self._corrections = dict(corrections or {})
        self._field = field

    def apply(self, store: RecordStore) -> RecordStore:
        if not self._corrections:
            return store

        corrected = []
        changed = 0
        for record in store:
            value = getattr(record, self._field.value)
            if isinstance(value, str) and value in self._corrections:
                record = replace(record, **{self._field.value: self._corrections[value]})
                changed += 1
            corrected.append(record)

        logger.info("Corrected %d value(s) in %r", changed, self._field.value)
        return store.replace(corrected)
