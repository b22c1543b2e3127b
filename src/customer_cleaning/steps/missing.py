from __future__ import annotations

import logging
import math
from dataclasses import replace

import numpy as np

from customer_cleaning.errors import InsufficientDataError
from customer_cleaning.models import is_missing
from customer_cleaning.schema import RecordField
from customer_cleaning.store import RecordStore

logger = logging.getLogger(__name__)


class MissingValueHandler:
    """Median imputation for one numeric field, then row filtering on a required field.

    Imputation runs first so the median reflects every record that entered
    the stage, including those the filter is about to drop.
    """

    def __init__(
        self,
        impute_field: RecordField = RecordField.PURCHASE_AMOUNT,
        required_field: RecordField = RecordField.EMAIL,
    ) -> None:
        if not impute_field.numeric:
            raise ValueError(f"Cannot take the median of non-numeric field {impute_field.value!r}")
        self._impute_field = impute_field
        self._required_field = required_field

    def missing_counts(self, store: RecordStore) -> dict[str, int]:
        return {field.value: store.missing_count(field.value) for field in RecordField}

    def median(self, store: RecordStore) -> float:
        present = store.present_values(self._impute_field.value)
        if not present:
            logger.error("No present values in %r to impute from", self._impute_field.value)
            raise InsufficientDataError(
                f"Cannot compute median of {self._impute_field.value!r}: no present values"
            )
        median = float(np.median(np.asarray(present, dtype=float)))
        if not math.isfinite(median):
            logger.error("Median of %r is not finite: %s", self._impute_field.value, median)
            raise InsufficientDataError(f"Median of {self._impute_field.value!r} is not finite: {median}")
        return median

    def impute(self, store: RecordStore) -> RecordStore:
        field = self._impute_field.value
        if store.missing_count(field) == 0:
            return store

        median = self.median(store)
        imputed = []
        filled = 0
        for record in store:
            if is_missing(getattr(record, field)):
                record = replace(record, **{field: median})
                filled += 1
            imputed.append(record)

        logger.info("Imputed %d missing %r value(s) with median %s", filled, field, median)
        return store.replace(imputed)

    def drop_missing(self, store: RecordStore) -> RecordStore:
        field = self._required_field.value
        kept = [record for record in store if not is_missing(getattr(record, field))]
        dropped = len(store) - len(kept)
        if dropped:
            logger.info("Dropped %d record(s) missing %r", dropped, field)
        return store.replace(kept)

    def apply(self, store: RecordStore) -> RecordStore:
        return self.drop_missing(self.impute(store))
