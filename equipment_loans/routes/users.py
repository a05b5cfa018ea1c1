from fastapi import APIRouter, Depends, status
from typing import List
from equipment_loans.state import get_tracker
from equipment_loans.services.tracker import LoanTracker
from equipment_loans.schemas.user import UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["Users"])

@router.get("/", response_model=List[UserResponse])
def list_users(tracker: LoanTracker = Depends(get_tracker)):
    """List all registered users in creation order."""
    return [UserResponse(**user.to_dict()) for user in tracker.users]

@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    tracker: LoanTracker = Depends(get_tracker)
):
    user = tracker.add_user(user_data)
    return UserResponse(**user.to_dict())
