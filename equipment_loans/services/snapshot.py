import json
import logging
from datetime import date
from typing import Any, Dict, Union
from pydantic import ValidationError
from equipment_loans.config import settings
from equipment_loans.schemas.snapshot import SnapshotDocument, ImportResult
from equipment_loans.services.exceptions import SnapshotError
from equipment_loans.services.store import RecordStore

logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "materials", "loans")

def export_snapshot(store: RecordStore) -> Dict[str, list]:
    """Bundle the three collections into a JSON-ready document."""
    return {
        "users": [user.to_dict() for user in store.users],
        "materials": [material.to_dict() for material in store.materials],
        "loans": [loan.to_dict() for loan in store.loans],
    }

def parse_snapshot(raw: Union[str, bytes, Dict[str, Any]]) -> Dict[str, list]:
    """Validate a snapshot document and convert it to record models.

    Returns only the collections present (and non-null) in the document.
    Raises SnapshotError when anything in it is malformed.
    """
    try:
        data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
    except (ValueError, RecursionError) as e:
        # ValueError covers decode errors and oversized integer literals
        raise SnapshotError(f"Snapshot is not valid JSON: {e}") from e
    
    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be a JSON object")
    
    try:
        document = SnapshotDocument.model_validate(data)
        collections = {}
        for key in COLLECTIONS:
            records = getattr(document, key)
            if records is not None:
                collections[key] = [record.to_model() for record in records]
    except ValidationError as e:
        raise SnapshotError(f"Snapshot has an invalid structure: {e.error_count()} error(s)") from e
    return collections

def import_snapshot(store: RecordStore, raw: Union[str, bytes, Dict[str, Any]]) -> ImportResult:
    """Replace the collections present in the document; the store is untouched on failure."""
    collections = parse_snapshot(raw)
    store.replace(collections)
    replaced = [key for key in COLLECTIONS if key in collections]
    logger.info(f"Snapshot imported, replaced collections: {', '.join(replaced) or 'none'}")
    return ImportResult(
        message="Data imported successfully",
        replaced=replaced,
        users=len(store.users),
        materials=len(store.materials),
        loans=len(store.loans),
    )

def snapshot_filename(day: date) -> str:
    return f"{settings.snapshot_basename}_{day.isoformat()}.json"

def history_filename(day: date) -> str:
    return f"{settings.history_basename}_{day.isoformat()}.json"

def is_snapshot_filename(filename: str) -> bool:
    return filename.lower().endswith(".json")
