from pydantic import BaseModel
from datetime import datetime

class User(BaseModel):
    id: str
    first_name: str
    last_name: str
    created_at: datetime
    
    class Config:
        frozen = True
    
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
    
    def to_dict(self):
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "createdAt": self.created_at.isoformat(),
        }
