from pydantic import BaseModel

class SummaryCounters(BaseModel):
    totalUsers: int = 0
    totalMaterials: int = 0
    totalLoans: int = 0
    activeLoans: int = 0
    returnedLoans: int = 0
    overdueLoans: int = 0
    availableMaterials: int = 0
    borrowedMaterials: int = 0
