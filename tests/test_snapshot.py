import json
import pytest
from datetime import date
from equipment_loans.models import LoanStatus
from equipment_loans.schemas import UserCreate, MaterialCreate, LoanCreate
from equipment_loans.services.exceptions import SnapshotError
from equipment_loans.services.snapshot import snapshot_filename, history_filename, is_snapshot_filename
from equipment_loans.services.store import RecordStore
from equipment_loans.services.tracker import LoanTracker
from conftest import FixedClock, utc


@pytest.fixture
def filled(tracker, clock):
    user = tracker.add_user(UserCreate(first_name="Bruno", last_name="Martin"))
    laptop = tracker.add_material(MaterialCreate(name="ThinkPad", category="Laptop"))
    mouse = tracker.add_material(MaterialCreate(name="MX Master", category="Mouse"))
    first = tracker.add_loan(LoanCreate(
        user_id=user.id, material_id=laptop.id, expected_return_date=date(2024, 1, 5)
    ))
    tracker.add_loan(LoanCreate(user_id=user.id, material_id=mouse.id))
    clock.moment = utc(2024, 1, 4, 16, 30)
    tracker.return_material(first.id)
    return tracker


def empty_tracker():
    return LoanTracker(clock=FixedClock(utc(2024, 1, 1)))


class TestExport:
    """Snapshot document layout"""

    def test_document_layout(self, filled):
        document = filled.export_snapshot()

        assert set(document) == {"users", "materials", "loans"}
        assert document["users"][0]["firstName"] == "Bruno"
        assert document["materials"][1]["category"] == "Mouse"
        loan = document["loans"][0]
        assert loan["expectedReturnDate"] == "2024-01-05"
        assert loan["status"] == "returned"
        assert loan["actualReturnDate"].startswith("2024-01-04T16:30:00")
        assert document["loans"][1]["expectedReturnDate"] is None

    def test_document_is_json_serializable(self, filled):
        assert json.loads(json.dumps(filled.export_snapshot())) == filled.export_snapshot()

    def test_filenames(self):
        assert snapshot_filename(date(2024, 3, 9)) == "gestion_materiel_2024-03-09.json"
        assert history_filename(date(2024, 3, 9)) == "historique_emprunts_2024-03-09.json"
        assert is_snapshot_filename("backup.JSON") is True
        assert is_snapshot_filename("backup.csv") is False


class TestImport:
    """Restoring a snapshot into the store"""

    def test_round_trip(self, filled):
        restored = empty_tracker()

        restored.import_snapshot(json.dumps(filled.export_snapshot()))

        assert restored.users == filled.users
        assert restored.materials == filled.materials
        assert restored.loans == filled.loans

    def test_partial_import_keeps_other_collections(self, filled):
        materials, loans = filled.materials, filled.loans
        document = {"users": [{
            "id": "u-2", "firstName": "Amélie", "lastName": "Martin",
            "createdAt": "2024-02-01T10:00:00+00:00",
        }]}

        result = filled.import_snapshot(document)

        assert result.replaced == ["users"]
        assert [u.id for u in filled.users] == ["u-2"]
        assert filled.materials == materials
        assert filled.loans == loans

    def test_empty_list_empties_collection(self, filled):
        filled.import_snapshot({"loans": []})

        assert filled.loans == []
        assert len(filled.materials) == 2

    def test_null_collection_is_ignored(self, filled):
        filled.import_snapshot({"users": None})

        assert len(filled.users) == 1

    @pytest.mark.parametrize("raw", [
        "{not json",
        "[1, 2, 3]",
        "[" * 100000,
        '{"users": ' + "1" * 5000 + "}",
        json.dumps({"users": [{"id": "u-1"}]}),
        json.dumps({"loans": [{
            "id": "l-1", "userId": "u", "materialId": "m",
            "borrowDate": "2024-01-01T09:00:00Z", "status": "returned",
        }]}),
    ])
    def test_malformed_document_leaves_store_untouched(self, filled, raw):
        before = RecordStore(filled.users, filled.materials, filled.loans)

        with pytest.raises(SnapshotError):
            filled.import_snapshot(raw)

        assert RecordStore(filled.users, filled.materials, filled.loans) == before

    def test_browser_timestamps_are_accepted(self):
        tracker = empty_tracker()
        tracker.import_snapshot({"loans": [{
            "id": "l-1",
            "userId": "u-1",
            "materialId": "m-1",
            "borrowDate": "2024-01-01T08:15:00.000Z",
            "expectedReturnDate": "2024-01-05T00:00:00.000Z",
            "status": "active",
        }]})

        loan = tracker.loans[0]
        assert loan.expected_return_date == date(2024, 1, 5)
        assert loan.borrow_date == utc(2024, 1, 1, 8, 15)
        assert loan.actual_return_date is None
        assert loan.status == LoanStatus.ACTIVE

    def test_imported_duplicate_active_loans_resolve_to_latest(self):
        tracker = empty_tracker()
        tracker.import_snapshot({
            "materials": [{"id": "m-1", "name": "ThinkPad", "category": "Laptop",
                           "createdAt": "2024-01-01T00:00:00Z"}],
            "loans": [
                {"id": "old", "userId": "u", "materialId": "m-1",
                 "borrowDate": "2024-01-01T09:00:00Z", "status": "active"},
                {"id": "new", "userId": "u", "materialId": "m-1",
                 "borrowDate": "2024-01-03T09:00:00Z", "status": "active"},
            ],
        })

        view = tracker.material_list()[0]
        assert view.available is False
        assert view.activeLoanId == "new"
