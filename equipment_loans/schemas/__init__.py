from .user import UserCreate, UserResponse
from .material import MaterialCreate, MaterialResponse, MaterialView
from .loan import (
    LoanCreate, LoanResponse, LoanBoardEntry,
    HistoryEntry, HistoryExportRow, LoanFormOptions
)
from .stats import SummaryCounters
from .snapshot import (
    UserRecord, MaterialRecord, LoanRecord,
    SnapshotDocument, ImportResult
)

__all__ = [
    "UserCreate", "UserResponse",
    "MaterialCreate", "MaterialResponse", "MaterialView",
    "LoanCreate", "LoanResponse", "LoanBoardEntry",
    "HistoryEntry", "HistoryExportRow", "LoanFormOptions",
    "SummaryCounters",
    "UserRecord", "MaterialRecord", "LoanRecord",
    "SnapshotDocument", "ImportResult",
]
