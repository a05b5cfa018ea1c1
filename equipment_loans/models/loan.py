from enum import Enum
from pydantic import BaseModel, model_validator
from datetime import date, datetime
from typing import Optional

class LoanStatus(str, Enum):
    ACTIVE = "active"
    RETURNED = "returned"

class Loan(BaseModel):
    id: str
    user_id: str
    material_id: str
    borrow_date: datetime
    expected_return_date: Optional[date] = None
    actual_return_date: Optional[datetime] = None
    status: LoanStatus = LoanStatus.ACTIVE
    
    class Config:
        frozen = True
    
    @model_validator(mode="after")
    def check_return_consistency(self):
        returned = self.status == LoanStatus.RETURNED
        if returned != (self.actual_return_date is not None):
            raise ValueError("status 'returned' requires actualReturnDate and vice versa")
        return self
    
    @property
    def is_active(self) -> bool:
        return self.status == LoanStatus.ACTIVE
    
    def mark_returned(self, when: datetime) -> "Loan":
        """Return a copy of this loan closed at the given time."""
        return self.model_copy(update={
            "status": LoanStatus.RETURNED,
            "actual_return_date": when,
        })
    
    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "materialId": self.material_id,
            "borrowDate": self.borrow_date.isoformat(),
            "expectedReturnDate": self.expected_return_date.isoformat() if self.expected_return_date else None,
            "actualReturnDate": self.actual_return_date.isoformat() if self.actual_return_date else None,
            "status": self.status.value,
        }
