"""Customer record cleaning: typo correction, imputation, dedupe and outlier removal."""

from customer_cleaning.errors import CleaningError, InsufficientDataError, PreconditionError, SchemaError
from customer_cleaning.models import MISSING, CleaningResult, CleaningSummary, CustomerRecord, is_missing
from customer_cleaning.schema import RecordField, RecordSchema
from customer_cleaning.store import RecordStore

__all__ = [
    "MISSING",
    "CleaningError",
    "CleaningResult",
    "CleaningSummary",
    "CustomerRecord",
    "InsufficientDataError",
    "PreconditionError",
    "RecordField",
    "RecordSchema",
    "RecordStore",
    "SchemaError",
    "is_missing",
]
