from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from customer_cleaning.schema import DEFAULT_MISSING_TOKENS, RecordField


@dataclass(frozen=True)
class CleaningConfig:
    """Knobs for a single pipeline run. The correction table is always supplied by the caller."""

    corrections: Mapping[str, str] = field(default_factory=dict)
    correction_field: RecordField = RecordField.NAME
    impute_field: RecordField = RecordField.PURCHASE_AMOUNT
    required_field: RecordField = RecordField.EMAIL
    key_field: RecordField = RecordField.CUSTOMER_ID
    outlier_field: RecordField = RecordField.PURCHASE_AMOUNT
    total_field: RecordField = RecordField.PURCHASE_AMOUNT
    iqr_multiplier: float = 1.5
    drop_on_zero_iqr: bool = True
    missing_tokens: tuple[str, ...] = DEFAULT_MISSING_TOKENS


def load_correction_table(path: Path) -> dict[str, str]:
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, dict):
        raise ValueError(f"Correction table in {path} must be a JSON object")
    for incorrect, correct in payload.items():
        if not isinstance(correct, str):
            raise ValueError(f"Correction for {incorrect!r} in {path} must be a string")
    return payload
