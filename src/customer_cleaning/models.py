from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from numbers import Real
from typing import TYPE_CHECKING, Any, Final

from customer_cleaning.errors import SchemaError

if TYPE_CHECKING:
    from customer_cleaning.store import RecordStore


class _MissingType:
    """Marker for an absent field value."""

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _MissingType()
_UNSET: Final = object()


def is_missing(value: object) -> bool:
    return value is MISSING


@dataclass(frozen=True, slots=True)
class CustomerRecord:
    """Canonical representation of a customer row.

    Every field must be given; an absent value is passed as ``MISSING``.
    Values are type-checked on construction, so a record that exists is valid.
    """

    customer_id: int
    name: str
    email: str | _MissingType = _UNSET
    purchase_amount: float | _MissingType = _UNSET

    def __post_init__(self) -> None:
        for name in ("email", "purchase_amount"):
            if getattr(self, name) is _UNSET:
                raise SchemaError(f"Record {self.customer_id!r} has no {name!r} field; pass MISSING if absent")

        if isinstance(self.customer_id, bool) or not isinstance(self.customer_id, int):
            raise SchemaError(f"customer_id must be an int, got {self.customer_id!r}")
        if not isinstance(self.name, str):
            raise SchemaError(f"Record {self.customer_id}: name must be a str, got {self.name!r}")
        if not (is_missing(self.email) or isinstance(self.email, str)):
            raise SchemaError(f"Record {self.customer_id}: email must be a str or MISSING, got {self.email!r}")
        if not (is_missing(self.purchase_amount) or _is_finite_number(self.purchase_amount)):
            raise SchemaError(
                f"Record {self.customer_id}: purchase_amount must be a finite number or MISSING, "
                f"got {self.purchase_amount!r}"
            )


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


@dataclass(frozen=True, slots=True)
class OutlierBounds:
    """Inclusive range a value must fall in to survive outlier filtering."""

    q1: float
    q3: float
    lower: float
    upper: float

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper


@dataclass(slots=True)
class CleaningSummary:
    """Diagnostics produced alongside the cleaned store.

    ``duplicate_groups`` is measured on the raw input while
    ``duplicates_removed`` is measured on the store that was actually
    deduplicated, so the two can disagree.
    """

    missing_counts: dict[str, int]
    duplicate_groups: int
    duplicates_removed: int
    total_before: float
    total_after: float
    records_before: int
    records_after: int
    outlier_bounds: OutlierBounds | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class CleaningResult:
    """Cleaned store plus the summary of how it was produced."""

    store: RecordStore
    summary: CleaningSummary
