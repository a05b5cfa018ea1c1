from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime
from .user import UserResponse
from .material import MaterialResponse

class LoanCreate(BaseModel):
    user_id: str = Field(..., min_length=1)
    material_id: str = Field(..., min_length=1)
    expected_return_date: Optional[date] = None

class LoanResponse(BaseModel):
    id: str
    userId: str
    materialId: str
    borrowDate: datetime
    expectedReturnDate: Optional[date] = None
    actualReturnDate: Optional[datetime] = None
    status: str

class LoanBoardEntry(LoanResponse):
    """Active loan annotated for the loan board."""
    userName: str
    materialName: str
    overdue: bool
    openEnded: bool

class HistoryEntry(LoanResponse):
    userName: str
    materialName: str
    materialCategory: str
    overdue: bool
    daysLate: int
    displayStatus: str

class LoanFormOptions(BaseModel):
    """Choices offered to the loan creation form."""
    users: List[UserResponse] = []
    materials: List[MaterialResponse] = []

class HistoryExportRow(BaseModel):
    user: str
    material: str
    category: str
    borrowDate: str
    expectedReturnDate: str
    actualReturnDate: str
    status: str
    overdue: str
    daysLate: int
