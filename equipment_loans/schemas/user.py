from pydantic import BaseModel, Field
from datetime import datetime

class UserCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    
    class Config:
        str_strip_whitespace = True

class UserResponse(BaseModel):
    id: str
    firstName: str
    lastName: str
    createdAt: datetime
