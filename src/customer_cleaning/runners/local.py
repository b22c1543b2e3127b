from __future__ import annotations

import logging

from customer_cleaning.config import CleaningConfig
from customer_cleaning.interfaces import (
    DeduplicationStep,
    MissingValueStep,
    OutlierStep,
    TypoCorrectionStep,
)
from customer_cleaning.models import CleaningResult, CleaningSummary
from customer_cleaning.schema import RecordField
from customer_cleaning.steps.dedupe import Deduplicator
from customer_cleaning.steps.missing import MissingValueHandler
from customer_cleaning.steps.outliers import IqrOutlierFilter
from customer_cleaning.steps.typos import TypoCorrector
from customer_cleaning.store import RecordStore

logger = logging.getLogger(__name__)


class LocalCleaningPipeline:
    """In-process runner: typo correction, missing values, dedupe, outliers, in that order."""

    def __init__(
        self,
        typo_corrector: TypoCorrectionStep,
        missing_handler: MissingValueStep,
        deduplicator: DeduplicationStep,
        outlier_filter: OutlierStep,
        total_field: RecordField = RecordField.PURCHASE_AMOUNT,
    ) -> None:
        self._typo_corrector = typo_corrector
        self._missing_handler = missing_handler
        self._deduplicator = deduplicator
        if not total_field.numeric:
            raise ValueError(f"Cannot total non-numeric field {total_field.value!r}")
        self._outlier_filter = outlier_filter
        self._total_field = total_field

    @classmethod
    def from_config(cls, config: CleaningConfig) -> "LocalCleaningPipeline":
        return cls(
            typo_corrector=TypoCorrector(config.corrections, field=config.correction_field),
            missing_handler=MissingValueHandler(
                impute_field=config.impute_field,
                required_field=config.required_field,
            ),
            deduplicator=Deduplicator(key_field=config.key_field),
            outlier_filter=IqrOutlierFilter(
                field=config.outlier_field,
                multiplier=config.iqr_multiplier,
                drop_on_zero_iqr=config.drop_on_zero_iqr,
            ),
            total_field=config.total_field,
        )

    def run(self, store: RecordStore) -> CleaningResult:
        logger.info("Cleaning %d record(s)", len(store))
        # reporting snapshot only; removal below works on the current store
        duplicate_groups = self._deduplicator.duplicate_groups(store)

        corrected = self._typo_corrector.apply(store)
        missing_counts = self._missing_handler.missing_counts(corrected)
        completed = self._missing_handler.apply(corrected)
        duplicates_removed = self._deduplicator.duplicates_removed(completed)
        deduplicated = self._deduplicator.apply(completed)
        bounds = self._outlier_filter.bounds(deduplicated)
        cleaned = self._outlier_filter.apply(deduplicated, bounds)

        summary = CleaningSummary(
            missing_counts=missing_counts,
            duplicate_groups=duplicate_groups,
            duplicates_removed=duplicates_removed,
            total_before=self._total(store),
            total_after=self._total(cleaned),
            records_before=len(store),
            records_after=len(cleaned),
            outlier_bounds=bounds,
        )
        logger.info("Cleaned store has %d of %d record(s)", len(cleaned), len(store))
        return CleaningResult(store=cleaned, summary=summary)

    def _total(self, store: RecordStore) -> float:
        return float(sum(store.present_values(self._total_field.value)))
