import pytest

from customer_cleaning.errors import SchemaError
from customer_cleaning.models import MISSING, CustomerRecord
from customer_cleaning.store import RecordStore


def test_replace_returns_new_store_and_leaves_original(reference_store) -> None:
    replaced = reference_store.replace(reference_store.records[:3])

    assert len(replaced) == 3
    assert len(reference_store) == 10
    assert replaced is not reference_store


def test_present_values_and_missing_count(reference_store) -> None:
    assert reference_store.missing_count("purchase_amount") == 2
    assert reference_store.missing_count("email") == 1
    assert len(reference_store.present_values("purchase_amount")) == 8


def test_store_rejects_non_records() -> None:
    with pytest.raises(SchemaError):
        RecordStore([CustomerRecord(customer_id=1, name="Ann", email=MISSING, purchase_amount=1.0), {"customer_id": 2}])


def test_store_equality_is_by_records() -> None:
    records = [CustomerRecord(customer_id=1, name="Ann", email="a@x.com", purchase_amount=1.0)]

    assert RecordStore(records) == RecordStore(list(records))
