from __future__ import annotations

from typing import Protocol

from customer_cleaning.models import CleaningResult, OutlierBounds
from customer_cleaning.store import RecordStore


class TypoCorrectionStep(Protocol):
    """Step 1: substitute known-incorrect values with their corrections."""

    def apply(self, store: RecordStore) -> RecordStore:
        ...


class MissingValueStep(Protocol):
    """Step 2: impute the numeric field, then drop records missing the required field."""

    def missing_counts(self, store: RecordStore) -> dict[str, int]:
        ...

    def apply(self, store: RecordStore) -> RecordStore:
        ...


class DeduplicationStep(Protocol):
    """Step 3: keep the first record per key."""

    def duplicate_groups(self, store: RecordStore) -> int:
        ...

    def duplicates_removed(self, store: RecordStore) -> int:
        ...

    def apply(self, store: RecordStore) -> RecordStore:
        ...


class OutlierStep(Protocol):
    """Step 4: drop records whose value falls outside the computed bounds."""

    def bounds(self, store: RecordStore) -> OutlierBounds | None:
        ...

    def apply(self, store: RecordStore, bounds: OutlierBounds | None = None) -> RecordStore:
        ...


class CleaningPipeline(Protocol):
    """Unified pipeline interface for the cleaning runners."""

    def run(self, store: RecordStore) -> CleaningResult:
        ...
