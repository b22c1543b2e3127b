import pytest

from customer_cleaning.schema import REFERENCE_SCHEMA
from customer_cleaning.store import RecordStore

_IDS = [101, 102, 103, 104, 105, 102, 106, 107, 108, 109]
_NAMES = [
    "John Doe",
    "Jane Smith",
    "Sam Brown",
    "Sue Johson",
    "Mike White",
    "Jane Smith",
    "Emily Davis",
    "Michael Johnson",
    "Chris Lee",
    "Chris Lee",
]
_EMAILS = [
    "john@example.com",
    "jane@example.com",
    "NA",
    "sue_j@example.com",
    "mike.w@example.com",
    "jane@example.com",
    "emily.d@example.com",
    "michael.j@example.com",
    "chris.l@example.com",
    "chris.l@example.com",
]


def _rows(amounts: list[str]) -> list[dict[str, str]]:
    return [
        {
            "Customer_ID": str(customer_id),
            "Name": name,
            "Email": email,
            "Purchase_Amount": amount,
        }
        for customer_id, name, email, amount in zip(_IDS, _NAMES, _EMAILS, amounts)
    ]


@pytest.fixture
def reference_rows() -> list[dict[str, str]]:
    """The simulated customer dataset, with two purchase amounts blanked out."""
    return _rows(["200", "300", "150", "NA", "NA", "300", "250", "180", "190", "200"])


@pytest.fixture
def reference_store(reference_rows: list[dict[str, str]]) -> RecordStore:
    return REFERENCE_SCHEMA.parse(reference_rows)


@pytest.fixture
def outlier_store() -> RecordStore:
    """Same dataset, but Mike White keeps his 4000 purchase."""
    return REFERENCE_SCHEMA.parse(_rows(["200", "300", "150", "NA", "4000", "300", "250", "180", "190", "200"]))
