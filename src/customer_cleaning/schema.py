from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum

from customer_cleaning.errors import SchemaError
from customer_cleaning.models import MISSING, CustomerRecord
from customer_cleaning.store import RecordStore

DEFAULT_MISSING_TOKENS = ("", "NA", "NaN", "null")


class RecordField(StrEnum):
    CUSTOMER_ID = "customer_id"
    NAME = "name"
    EMAIL = "email"
    PURCHASE_AMOUNT = "purchase_amount"

    @property
    def nullable(self) -> bool:
        return self in (RecordField.EMAIL, RecordField.PURCHASE_AMOUNT)

    @property
    def numeric(self) -> bool:
        return self is RecordField.PURCHASE_AMOUNT


@dataclass(frozen=True)
class RecordSchema:
    """Maps source-system columns onto record fields and validates rows once at ingestion."""

    field_to_column: Mapping[RecordField, str]
    missing_tokens: tuple[str, ...] = DEFAULT_MISSING_TOKENS

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[RecordField, str],
        missing_tokens: Iterable[str] = DEFAULT_MISSING_TOKENS,
    ) -> "RecordSchema":
        absent = [f.value for f in RecordField if f not in mapping]
        if absent:
            raise SchemaError(f"No source column mapped for fields: {', '.join(absent)}")
        return cls(field_to_column=dict(mapping), missing_tokens=tuple(missing_tokens))

    def column_for(self, field: RecordField) -> str:
        return self.field_to_column[field]

    def parse(self, rows: Iterable[Mapping[str, object]]) -> RecordStore:
        return RecordStore(self.parse_row(row, index) for index, row in enumerate(rows))

    def parse_row(self, row: Mapping[str, object], index: int = 0) -> CustomerRecord:
        values: dict[str, object] = {}
        for field in RecordField:
            column = self.column_for(field)
            if column not in row:
                raise SchemaError(f"Row {index} has no column {column!r} for field {field.value!r}")
            values[field.value] = self._coerce(field, row[column], index)
        return CustomerRecord(**values)

    def _coerce(self, field: RecordField, raw: object, index: int) -> object:
        if self._is_missing_token(raw):
            if field.nullable:
                return MISSING
            raise SchemaError(f"Row {index} is missing required field {field.value!r}")

        if field is RecordField.CUSTOMER_ID:
            try:
                number = float(str(raw).strip())
            except ValueError as exc:
                raise SchemaError(f"Row {index} has non-numeric customer_id {raw!r}") from exc
            if not number.is_integer():
                raise SchemaError(f"Row {index} has non-integer customer_id {raw!r}")
            return int(number)

        if field is RecordField.PURCHASE_AMOUNT:
            try:
                amount = float(str(raw).strip())
            except ValueError as exc:
                raise SchemaError(f"Row {index} has non-numeric purchase_amount {raw!r}") from exc
            if math.isnan(amount):
                return MISSING
            if not math.isfinite(amount):
                raise SchemaError(f"Row {index} has non-finite purchase_amount {raw!r}")
            return amount

        return str(raw).strip()

    def _is_missing_token(self, raw: object) -> bool:
        if raw is None or raw is MISSING:
            return True
        if isinstance(raw, float) and math.isnan(raw):
            return True
        return isinstance(raw, str) and raw.strip() in self.missing_tokens


REFERENCE_SCHEMA = RecordSchema.from_mapping(
    {
        RecordField.CUSTOMER_ID: "Customer_ID",
        RecordField.NAME: "Name",
        RecordField.EMAIL: "Email",
        RecordField.PURCHASE_AMOUNT: "Purchase_Amount",
    }
)
