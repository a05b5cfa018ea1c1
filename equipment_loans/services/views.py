"""Display projections derived from the raw records.

Every function here is a pure function of the collections it is given and
of ``now``; nothing is cached, so views are recomputed on each request.
"""
from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, List, Sequence
from equipment_loans.config import settings
from equipment_loans.models import User, Material, Loan
from equipment_loans.schemas.loan import (
    LoanBoardEntry, HistoryEntry, HistoryExportRow, LoanFormOptions
)
from equipment_loans.schemas.stats import SummaryCounters
from equipment_loans.schemas.user import UserResponse
from equipment_loans.schemas.material import MaterialResponse, MaterialView
from equipment_loans.services.availability import find_active_loan
from equipment_loans.services.overdue import is_overdue, days_late, display_status
from equipment_loans.utils.collation import collation_key
from equipment_loans.utils.timezone import to_local

class MaterialFilter(str, Enum):
    ALL = "all"
    AVAILABLE = "available"
    BORROWED = "borrowed"

class HistoryStatusFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    RETURNED = "returned"

class HistorySort(str, Enum):
    DATE = "date"
    USER = "user"
    MATERIAL = "material"

STATUS_LABELS = {"active": "Active", "returned": "Returned"}

class NameResolver:
    """Resolves loan references to display names, tolerating dangling ids."""

    def __init__(self, users: Iterable[User], materials: Iterable[Material]):
        self._users: Dict[str, User] = {u.id: u for u in users}
        self._materials: Dict[str, Material] = {m.id: m for m in materials}

    def user_name(self, user_id: str) -> str:
        user = self._users.get(user_id)
        return user.full_name if user else settings.unknown_user_label

    def material_name(self, material_id: str) -> str:
        material = self._materials.get(material_id)
        return material.name if material else settings.unknown_material_label

    def material_category(self, material_id: str) -> str:
        material = self._materials.get(material_id)
        return material.category if material else ""

def _loan_fields(loan: Loan) -> dict:
    return {
        "id": loan.id,
        "userId": loan.user_id,
        "materialId": loan.material_id,
        "borrowDate": loan.borrow_date,
        "expectedReturnDate": loan.expected_return_date,
        "actualReturnDate": loan.actual_return_date,
        "status": loan.status.value,
    }

def material_list(
    materials: Sequence[Material],
    loans: Sequence[Loan],
    availability: MaterialFilter = MaterialFilter.ALL,
) -> List[MaterialView]:
    views = []
    for material in materials:
        active = find_active_loan(material.id, loans)
        available = active is None
        if availability == MaterialFilter.AVAILABLE and not available:
            continue
        if availability == MaterialFilter.BORROWED and available:
            continue
        views.append(MaterialView(
            id=material.id,
            name=material.name,
            category=material.category,
            createdAt=material.created_at,
            available=available,
            activeLoanId=active.id if active else None,
        ))
    return views

def available_materials(materials: Sequence[Material], loans: Sequence[Loan]) -> List[Material]:
    return [m for m in materials if find_active_loan(m.id, loans) is None]

def loan_form_options(
    users: Sequence[User],
    materials: Sequence[Material],
    loans: Sequence[Loan],
) -> LoanFormOptions:
    """Users and the materials a new loan may be created for."""
    return LoanFormOptions(
        users=[UserResponse(**u.to_dict()) for u in users],
        materials=[MaterialResponse(**m.to_dict()) for m in available_materials(materials, loans)],
    )

def loan_board(
    users: Sequence[User],
    materials: Sequence[Material],
    loans: Sequence[Loan],
    now: datetime,
) -> List[LoanBoardEntry]:
    names = NameResolver(users, materials)
    return [
        LoanBoardEntry(
            **_loan_fields(loan),
            userName=names.user_name(loan.user_id),
            materialName=names.material_name(loan.material_id),
            overdue=is_overdue(loan, now),
            openEnded=loan.expected_return_date is None,
        )
        for loan in loans
        if loan.is_active
    ]

def history_table(
    users: Sequence[User],
    materials: Sequence[Material],
    loans: Sequence[Loan],
    now: datetime,
    status: HistoryStatusFilter = HistoryStatusFilter.ALL,
    sort_by: HistorySort = HistorySort.DATE,
) -> List[HistoryEntry]:
    names = NameResolver(users, materials)

    selected = [
        loan for loan in loans
        if status == HistoryStatusFilter.ALL or loan.status.value == status.value
    ]

    if sort_by == HistorySort.USER:
        selected.sort(key=lambda l: collation_key(names.user_name(l.user_id)))
    elif sort_by == HistorySort.MATERIAL:
        selected.sort(key=lambda l: collation_key(names.material_name(l.material_id)))
    else:
        selected.sort(key=lambda l: l.borrow_date, reverse=True)

    return [
        HistoryEntry(
            **_loan_fields(loan),
            userName=names.user_name(loan.user_id),
            materialName=names.material_name(loan.material_id),
            materialCategory=names.material_category(loan.material_id),
            overdue=is_overdue(loan, now),
            daysLate=days_late(loan, now),
            displayStatus=display_status(loan, now),
        )
        for loan in selected
    ]

def summary_counters(
    users: Sequence[User],
    materials: Sequence[Material],
    loans: Sequence[Loan],
    now: datetime,
) -> SummaryCounters:
    available = len(available_materials(materials, loans))
    return SummaryCounters(
        totalUsers=len(users),
        totalMaterials=len(materials),
        totalLoans=len(loans),
        activeLoans=sum(1 for l in loans if l.is_active),
        returnedLoans=sum(1 for l in loans if not l.is_active),
        overdueLoans=sum(1 for l in loans if is_overdue(l, now)),
        availableMaterials=available,
        borrowedMaterials=len(materials) - available,
    )

def _format_timestamp(value: datetime) -> str:
    return to_local(value).strftime("%d/%m/%Y %H:%M:%S")

def history_export(entries: Iterable[HistoryEntry]) -> List[HistoryExportRow]:
    """Flatten history entries into the rows of the downloadable history file."""
    rows = []
    for entry in entries:
        rows.append(HistoryExportRow(
            user=entry.userName,
            material=entry.materialName,
            category=entry.materialCategory,
            borrowDate=_format_timestamp(entry.borrowDate),
            expectedReturnDate=entry.expectedReturnDate.strftime("%d/%m/%Y") if entry.expectedReturnDate else "Not set",
            actualReturnDate=_format_timestamp(entry.actualReturnDate) if entry.actualReturnDate else "",
            status=STATUS_LABELS[entry.status],
            overdue="Yes" if entry.overdue else "No",
            daysLate=entry.daysLate,
        ))
    return rows
