from pydantic import BaseModel
from datetime import datetime

class Material(BaseModel):
    id: str
    name: str
    category: str
    created_at: datetime
    
    class Config:
        frozen = True
    
    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "createdAt": self.created_at.isoformat(),
        }
