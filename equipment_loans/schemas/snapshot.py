from pydantic import BaseModel, field_validator, model_validator
from typing import Optional, List
from datetime import date, datetime
import pytz
from equipment_loans.models import User, Material, Loan, LoanStatus
from equipment_loans.utils.timezone import as_aware

class UserRecord(BaseModel):
    id: str
    firstName: str
    lastName: str
    createdAt: datetime
    
    @field_validator("createdAt")
    @classmethod
    def aware_timestamp(cls, value: datetime) -> datetime:
        return as_aware(value)
    
    def to_model(self) -> User:
        return User(
            id=self.id,
            first_name=self.firstName,
            last_name=self.lastName,
            created_at=self.createdAt,
        )

class MaterialRecord(BaseModel):
    id: str
    name: str
    category: str
    createdAt: datetime
    
    @field_validator("createdAt")
    @classmethod
    def aware_timestamp(cls, value: datetime) -> datetime:
        return as_aware(value)
    
    def to_model(self) -> Material:
        return Material(
            id=self.id,
            name=self.name,
            category=self.category,
            created_at=self.createdAt,
        )

class LoanRecord(BaseModel):
    id: str
    userId: str
    materialId: str
    borrowDate: datetime
    expectedReturnDate: Optional[date] = None
    actualReturnDate: Optional[datetime] = None
    status: LoanStatus
    
    @field_validator("expectedReturnDate", mode="before")
    @classmethod
    def calendar_date(cls, value):
        # Browser exports carry the date as a full UTC timestamp
        if isinstance(value, str) and "T" in value:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        if isinstance(value, datetime):
            return as_aware(value).astimezone(pytz.utc).date()
        return value
    
    @field_validator("borrowDate", "actualReturnDate")
    @classmethod
    def aware_timestamp(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_aware(value) if value is not None else None
    
    @model_validator(mode="after")
    def check_return_consistency(self):
        if (self.status == LoanStatus.RETURNED) != (self.actualReturnDate is not None):
            raise ValueError(f"Loan {self.id}: status and actualReturnDate disagree")
        return self
    
    def to_model(self) -> Loan:
        return Loan(
            id=self.id,
            user_id=self.userId,
            material_id=self.materialId,
            borrow_date=self.borrowDate,
            expected_return_date=self.expectedReturnDate,
            actual_return_date=self.actualReturnDate,
            status=self.status,
        )

class SnapshotDocument(BaseModel):
    """Export/import document. Absent or null collections are left untouched on import."""
    users: Optional[List[UserRecord]] = None
    materials: Optional[List[MaterialRecord]] = None
    loans: Optional[List[LoanRecord]] = None

class ImportResult(BaseModel):
    message: str
    replaced: List[str] = []
    users: int = 0
    materials: int = 0
    loans: int = 0
