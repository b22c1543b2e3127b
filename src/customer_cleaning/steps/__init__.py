from customer_cleaning.steps.dedupe import Deduplicator
from customer_cleaning.steps.missing import MissingValueHandler
from customer_cleaning.steps.outliers import IqrOutlierFilter
from customer_cleaning.steps.typos import TypoCorrector

__all__ = [
    "TypoCorrector",
    "MissingValueHandler",
    "Deduplicator",
    "IqrOutlierFilter",
]
