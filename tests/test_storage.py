from unittest.mock import MagicMock

import pytest

from plant_match_reservations import confirm_reservation
from plant_match_storage import ReservationStorage


@pytest.fixture
def confirmed_pickup(pending_pickup, contact, pickup_slot, t0):
    return confirm_reservation(pending_pickup, contact, pickup_slot, now=t0).reservation


@pytest.fixture
def firestore_db():
    return MagicMock()


def test_storage_writes_document_under_reservation_id(firestore_db, confirmed_pickup):
    storage = ReservationStorage(db=firestore_db)
    collection = firestore_db.collection.return_value

    storage.create_reservation(confirmed_pickup)

    collection.document.assert_called_with(confirmed_pickup.id)
    written = collection.document.return_value.set.call_args[0][0]
    assert "id" not in written
    assert written["seller_id"] == "s1"
    assert written["contact_phone"] == "+91-9876543210"
    assert written["status"] == "confirmed"
    assert written["expires_at"].startswith("2024-01-03T00:00:00")


def test_storage_round_trips_reservation(firestore_db, confirmed_pickup):
    storage = ReservationStorage(db=firestore_db)
    collection = firestore_db.collection.return_value
    storage.create_reservation(confirmed_pickup)
    written = collection.document.return_value.set.call_args[0][0]

    doc = MagicMock(exists=True, id=confirmed_pickup.id)
    doc.to_dict.return_value = written
    collection.document.return_value.get.return_value = doc

    assert storage.get_reservation(confirmed_pickup.id) == confirmed_pickup


def test_storage_missing_reservation(firestore_db):
    storage = ReservationStorage(db=firestore_db)
    firestore_db.collection.return_value.document.return_value.get.return_value = MagicMock(exists=False)
    assert storage.get_reservation("RES-000000000000") is None


def test_storage_read_errors_are_logged_not_raised(firestore_db):
    storage = ReservationStorage(db=firestore_db)
    collection = firestore_db.collection.return_value
    collection.document.return_value.get.side_effect = RuntimeError("unavailable")
    collection.where.side_effect = RuntimeError("unavailable")

    assert storage.get_reservation("RES-1") is None
    assert storage.get_reservations_for_seller("s1") == []


def test_storage_queries_by_seller(firestore_db, confirmed_pickup):
    storage = ReservationStorage(db=firestore_db)
    collection = firestore_db.collection.return_value
    storage.create_reservation(confirmed_pickup)
    written = collection.document.return_value.set.call_args[0][0]

    doc = MagicMock(id=confirmed_pickup.id)
    doc.to_dict.return_value = written
    collection.where.return_value.stream.return_value = [doc]

    found = storage.get_reservations_for_seller("s1")
    collection.where.assert_called_with("seller_id", "==", "s1")
    assert [r.id for r in found] == [confirmed_pickup.id]


def test_storage_rejects_unconfirmed(firestore_db, pending_pickup):
    storage = ReservationStorage(db=firestore_db)
    with pytest.raises(ValueError):
        storage.create_reservation(pending_pickup)


def test_storage_write_errors_propagate(firestore_db, confirmed_pickup):
    storage = ReservationStorage(db=firestore_db)
    firestore_db.collection.return_value.document.return_value.set.side_effect = RuntimeError("denied")
    with pytest.raises(RuntimeError):
        storage.create_reservation(confirmed_pickup)


def test_mock_storage_lookups(mock_storage, confirmed_pickup):
    mock_storage.create_reservation(confirmed_pickup)
    assert mock_storage.get_reservation(confirmed_pickup.id) == confirmed_pickup
    assert mock_storage.get_reservations_for_phone("+91-9876543210") == [confirmed_pickup]
    assert mock_storage.get_reservations_for_seller("s2") == []
