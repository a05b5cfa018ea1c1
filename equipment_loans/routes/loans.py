from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from equipment_loans.state import get_tracker
from equipment_loans.services.tracker import LoanTracker
from equipment_loans.services.exceptions import NotFoundError, ConflictError, InvalidRequestError
from equipment_loans.schemas.loan import LoanCreate, LoanResponse, LoanBoardEntry, LoanFormOptions

router = APIRouter(prefix="/api/loans", tags=["Loans"])

@router.get("/active", response_model=List[LoanBoardEntry])
def get_active_loans(tracker: LoanTracker = Depends(get_tracker)):
    """Loan board: every active loan with resolved names and overdue flag."""
    return tracker.loan_board()

@router.get("/options", response_model=LoanFormOptions)
def get_loan_options(tracker: LoanTracker = Depends(get_tracker)):
    """Users and available materials a new loan can be created for."""
    return tracker.loan_form_options()

@router.post("/", response_model=LoanResponse, status_code=status.HTTP_201_CREATED)
def create_loan(
    loan_data: LoanCreate,
    tracker: LoanTracker = Depends(get_tracker)
):
    """Create a new loan (checkout a material)."""
    try:
        loan = tracker.add_loan(loan_data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    
    return LoanResponse(**loan.to_dict())

@router.post("/{loan_id}/return", response_model=LoanResponse)
def return_loan(
    loan_id: str,
    tracker: LoanTracker = Depends(get_tracker)
):
    """Mark a loan as returned now."""
    try:
        loan = tracker.return_material(loan_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    
    return LoanResponse(**loan.to_dict())
