from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from typing import List
from equipment_loans.state import get_tracker
from equipment_loans.services.tracker import LoanTracker
from equipment_loans.services.snapshot import history_filename
from equipment_loans.services.views import HistoryStatusFilter, HistorySort
from equipment_loans.schemas.loan import HistoryEntry
from equipment_loans.schemas.stats import SummaryCounters

router = APIRouter(prefix="/api", tags=["History"])

@router.get("/history", response_model=List[HistoryEntry])
def get_history(
    status: HistoryStatusFilter = HistoryStatusFilter.ALL,
    sort_by: HistorySort = HistorySort.DATE,
    tracker: LoanTracker = Depends(get_tracker)
):
    """All loans, filtered by status and sorted by date, user or material."""
    return tracker.history(status, sort_by)

@router.get("/history/export")
def export_history(
    status: HistoryStatusFilter = HistoryStatusFilter.ALL,
    sort_by: HistorySort = HistorySort.DATE,
    tracker: LoanTracker = Depends(get_tracker)
):
    """Download the current history view as display rows."""
    rows = tracker.history_export(status, sort_by)
    filename = history_filename(tracker.now().date())
    return JSONResponse(
        content=jsonable_encoder(rows),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

@router.get("/stats", response_model=SummaryCounters)
def get_stats(tracker: LoanTracker = Depends(get_tracker)):
    return tracker.summary()
