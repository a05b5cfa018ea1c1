from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from equipment_loans.config import settings

class MaterialCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    
    class Config:
        str_strip_whitespace = True
    
    @field_validator("category")
    @classmethod
    def category_must_be_known(cls, value: str) -> str:
        if value not in settings.material_categories:
            raise ValueError(f"Unknown category: {value}")
        return value

class MaterialResponse(BaseModel):
    id: str
    name: str
    category: str
    createdAt: datetime

class MaterialView(MaterialResponse):
    """Material with its computed availability badge."""
    available: bool
    activeLoanId: Optional[str] = None
