from __future__ import annotations

import logging
import math

import numpy as np

from customer_cleaning.errors import PreconditionError
from customer_cleaning.models import OutlierBounds
from customer_cleaning.schema import RecordField
from customer_cleaning.store import RecordStore

logger = logging.getLogger(__name__)


class IqrOutlierFilter:
    """Tukey fences: keep values within [Q1 - k*IQR, Q3 + k*IQR], inclusive.

    Quartiles use linear interpolation between order statistics. When every
    value is identical the IQR is zero and the fences collapse onto that
    value; ``drop_on_zero_iqr=False`` skips filtering in that case instead.
    """

    def __init__(
        self,
        field: RecordField = RecordField.PURCHASE_AMOUNT,
        multiplier: float = 1.5,
        drop_on_zero_iqr: bool = True,
    ) -> None:
        if not field.numeric:
            raise ValueError(f"Cannot filter outliers on non-numeric field {field.value!r}")
        if multiplier < 0:
            raise ValueError(f"IQR multiplier must be non-negative, got {multiplier}")
        self._field = field
        self._multiplier = multiplier
        self._drop_on_zero_iqr = drop_on_zero_iqr

    def bounds(self, store: RecordStore) -> OutlierBounds | None:
        if len(store) == 0:
            return None
        if store.missing_count(self._field.value):
            logger.error("Missing %r values reached the outlier filter", self._field.value)
            raise PreconditionError(
                f"Field {self._field.value!r} must have no missing values before outlier filtering"
            )

        values = np.asarray(store.values(self._field.value), dtype=float)
        q1, q3 = (float(q) for q in np.percentile(values, [25, 75]))
        if not (math.isfinite(q1) and math.isfinite(q3)):
            logger.error("Quartiles of %r are not finite: q1=%s q3=%s", self._field.value, q1, q3)
            raise PreconditionError(f"Field {self._field.value!r} produced non-finite quartiles")
        iqr = q3 - q1
        return OutlierBounds(
            q1=q1,
            q3=q3,
            lower=q1 - self._multiplier * iqr,
            upper=q3 + self._multiplier * iqr,
        )

    def apply(self, store: RecordStore, bounds: OutlierBounds | None = None) -> RecordStore:
        """Filter with ``bounds`` if given, otherwise compute them from ``store``."""
        if bounds is None:
            bounds = self.bounds(store)
        if bounds is None:
            return store
        if bounds.iqr == 0 and not self._drop_on_zero_iqr:
            logger.warning("IQR of %r is zero; skipping outlier filtering", self._field.value)
            return store

        kept = [record for record in store if bounds.contains(getattr(record, self._field.value))]
        logger.info(
            "Removed %d outlier(s) outside [%s, %s] in %r",
            len(store) - len(kept),
            bounds.lower,
            bounds.upper,
            self._field.value,
        )
        return store.replace(kept)
