import logging
import threading
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union
from equipment_loans.models import User, Material, Loan, LoanStatus
from equipment_loans.schemas.user import UserCreate
from equipment_loans.schemas.material import MaterialCreate, MaterialView
from equipment_loans.schemas.loan import (
    LoanCreate, LoanBoardEntry, HistoryEntry, HistoryExportRow, LoanFormOptions
)
from equipment_loans.schemas.snapshot import ImportResult
from equipment_loans.schemas.stats import SummaryCounters
from equipment_loans.services import snapshot, views
from equipment_loans.services.availability import find_active_loan
from equipment_loans.services.exceptions import (
    NotFoundError, ConflictError, InvalidRequestError, SnapshotError
)
from equipment_loans.services.store import RecordStore
from equipment_loans.utils.ids import generate_id
from equipment_loans.utils.timezone import now_local

logger = logging.getLogger(__name__)


class LoanTracker:
    """Single owner of the record store.

    Commands are the only way to change state and each one runs under the
    tracker lock; read accessors and views work on copies of the collections.
    """

    def __init__(self, store: Optional[RecordStore] = None, clock: Callable[[], datetime] = now_local):
        self._store = store if store is not None else RecordStore()
        self._clock = clock
        self._lock = threading.Lock()

    def now(self) -> datetime:
        return self._clock()

    # Read accessors

    @property
    def users(self) -> List[User]:
        return self._store.users

    @property
    def materials(self) -> List[Material]:
        return self._store.materials

    @property
    def loans(self) -> List[Loan]:
        return self._store.loans

    def get_loan(self, loan_id: str) -> Optional[Loan]:
        return self._store.get_loan(loan_id)

    def _collections(self):
        with self._lock:
            return self._store.users, self._store.materials, self._store.loans

    # Commands

    def add_user(self, data: UserCreate) -> User:
        user = User(
            id=generate_id(),
            first_name=data.first_name,
            last_name=data.last_name,
            created_at=self.now(),
        )
        with self._lock:
            self._store.add_user(user)
        logger.info(f"User {user.id} added: {user.full_name}")
        return user

    def add_material(self, data: MaterialCreate) -> Material:
        material = Material(
            id=generate_id(),
            name=data.name,
            category=data.category,
            created_at=self.now(),
        )
        with self._lock:
            self._store.add_material(material)
        logger.info(f"Material {material.id} added: {material.name} ({material.category})")
        return material

    def add_loan(self, data: LoanCreate) -> Loan:
        """Check a material out to a user.

        Raises NotFoundError for unknown user or material, InvalidRequestError
        for an expected return date in the past and ConflictError when the
        material already has an active loan.
        """
        now = self.now()
        with self._lock:
            if self._store.get_user(data.user_id) is None:
                raise NotFoundError(f"User {data.user_id} not found")
            if self._store.get_material(data.material_id) is None:
                raise NotFoundError(f"Material {data.material_id} not found")
            if data.expected_return_date is not None and data.expected_return_date < now.date():
                raise InvalidRequestError("Expected return date cannot be in the past")

            active = find_active_loan(data.material_id, self._store.loans)
            if active is not None:
                logger.warning(f"Loan refused: material {data.material_id} already on loan ({active.id})")
                raise ConflictError(f"Material {data.material_id} is already on loan")

            loan = Loan(
                id=generate_id(),
                user_id=data.user_id,
                material_id=data.material_id,
                borrow_date=now,
                expected_return_date=data.expected_return_date,
                actual_return_date=None,
                status=LoanStatus.ACTIVE,
            )
            self._store.add_loan(loan)
        logger.info(f"Loan {loan.id} created: material {loan.material_id} to user {loan.user_id}")
        return loan

    def return_material(self, loan_id: str) -> Loan:
        with self._lock:
            loan = self._store.get_loan(loan_id)
            if loan is None:
                raise NotFoundError(f"Loan {loan_id} not found")
            if not loan.is_active:
                raise ConflictError(f"Loan {loan_id} was already returned")
            returned = loan.mark_returned(self.now())
            self._store.update_loan(returned)
        logger.info(f"Loan {loan_id} returned")
        return returned

    def import_snapshot(self, raw: Union[str, bytes, Dict[str, Any]]) -> ImportResult:
        with self._lock:
            try:
                return snapshot.import_snapshot(self._store, raw)
            except SnapshotError as e:
                logger.warning(f"Snapshot import rejected: {e}")
                raise

    def export_snapshot(self) -> Dict[str, list]:
        with self._lock:
            return snapshot.export_snapshot(self._store)

    # Views

    def material_list(self, availability: views.MaterialFilter = views.MaterialFilter.ALL) -> List[MaterialView]:
        _, materials, loans = self._collections()
        return views.material_list(materials, loans, availability)

    def loan_form_options(self) -> LoanFormOptions:
        return views.loan_form_options(*self._collections())

    def loan_board(self) -> List[LoanBoardEntry]:
        return views.loan_board(*self._collections(), self.now())

    def history(
        self,
        status: views.HistoryStatusFilter = views.HistoryStatusFilter.ALL,
        sort_by: views.HistorySort = views.HistorySort.DATE,
    ) -> List[HistoryEntry]:
        return views.history_table(*self._collections(), self.now(), status, sort_by)

    def history_export(
        self,
        status: views.HistoryStatusFilter = views.HistoryStatusFilter.ALL,
        sort_by: views.HistorySort = views.HistorySort.DATE,
    ) -> List[HistoryExportRow]:
        return views.history_export(self.history(status, sort_by))

    def summary(self) -> SummaryCounters:
        return views.summary_counters(*self._collections(), self.now())
