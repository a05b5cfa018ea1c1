from fastapi import APIRouter, Depends, status
from typing import List
from equipment_loans.config import settings
from equipment_loans.state import get_tracker
from equipment_loans.services.tracker import LoanTracker
from equipment_loans.services.views import MaterialFilter
from equipment_loans.schemas.material import MaterialCreate, MaterialResponse, MaterialView

router = APIRouter(prefix="/api/materials", tags=["Materials"])

@router.get("/", response_model=List[MaterialView])
def list_materials(
    filter: MaterialFilter = MaterialFilter.ALL,
    tracker: LoanTracker = Depends(get_tracker)
):
    """List materials with their availability, optionally only available or borrowed ones."""
    return tracker.material_list(filter)

@router.get("/categories", response_model=List[str])
def list_categories():
    return settings.material_categories

@router.post("/", response_model=MaterialResponse, status_code=status.HTTP_201_CREATED)
def create_material(
    material_data: MaterialCreate,
    tracker: LoanTracker = Depends(get_tracker)
):
    material = tracker.add_material(material_data)
    return MaterialResponse(**material.to_dict())
