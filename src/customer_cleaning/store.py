from __future__ import annotations

from collections.abc import Iterable, Iterator

from customer_cleaning.errors import SchemaError
from customer_cleaning.models import CustomerRecord, is_missing


class RecordStore:
    """Immutable ordered collection of customer records.

    Every stage reads from one store and hands back a new one through
    ``replace``, so a store captured before a stage never changes afterwards.
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[CustomerRecord] = ()) -> None:
        frozen = tuple(records)
        for index, record in enumerate(frozen):
            if not isinstance(record, CustomerRecord):
                raise SchemaError(f"Item {index} is not a CustomerRecord: {type(record).__name__}")
        self._records = frozen

    @property
    def records(self) -> tuple[CustomerRecord, ...]:
        return self._records

    def replace(self, records: Iterable[CustomerRecord]) -> RecordStore:
        return RecordStore(records)

    def values(self, field: str) -> list[object]:
        return [getattr(record, field) for record in self._records]

    def present_values(self, field: str) -> list[object]:
        return [value for value in self.values(field) if not is_missing(value)]

    def missing_count(self, field: str) -> int:
        return sum(1 for value in self.values(field) if is_missing(value))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CustomerRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> CustomerRecord:
        return self._records[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordStore):
            return NotImplemented
        return self._records == other._records

    def __hash__(self) -> int:
        return hash(self._records)

    def __repr__(self) -> str:
        return f"RecordStore({len(self._records)} records)"
