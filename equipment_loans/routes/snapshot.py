import logging
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse
from equipment_loans.state import get_tracker
from equipment_loans.services.tracker import LoanTracker
from equipment_loans.services.exceptions import SnapshotError
from equipment_loans.services.snapshot import snapshot_filename, is_snapshot_filename
from equipment_loans.schemas.snapshot import ImportResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/snapshot", tags=["Snapshot"])

@router.get("/")
def export_snapshot(tracker: LoanTracker = Depends(get_tracker)):
    """Download users, materials and loans as one JSON document."""
    document = tracker.export_snapshot()
    filename = snapshot_filename(tracker.now().date())
    logger.info(f"Snapshot exported as {filename}")
    return JSONResponse(
        content=document,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

@router.post("/import", response_model=ImportResult)
def import_snapshot(
    file: UploadFile = File(...),
    tracker: LoanTracker = Depends(get_tracker)
):
    """Replace the collections present in an uploaded snapshot file.
    On any error the current data is left unchanged."""
    if not file.filename or not is_snapshot_filename(file.filename):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only .json files can be imported"
        )
    
    content = file.file.read()
    try:
        return tracker.import_snapshot(content)
    except SnapshotError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Error while importing data: {e}"
        )
