from typing import Dict, List, Optional, Sequence
from equipment_loans.models import User, Material, Loan

class RecordStore:
    """In-memory holder of the three record collections.

    The store does no locking and enforces no loan rules; it is owned by a
    single LoanTracker which serializes every write.
    """
    
    def __init__(self, users: Sequence[User] = (), materials: Sequence[Material] = (), loans: Sequence[Loan] = ()):
        self._users: List[User] = list(users)
        self._materials: List[Material] = list(materials)
        self._loans: List[Loan] = list(loans)
    
    @property
    def users(self) -> List[User]:
        return list(self._users)
    
    @property
    def materials(self) -> List[Material]:
        return list(self._materials)
    
    @property
    def loans(self) -> List[Loan]:
        return list(self._loans)
    
    def get_user(self, user_id: str) -> Optional[User]:
        return next((u for u in self._users if u.id == user_id), None)
    
    def get_material(self, material_id: str) -> Optional[Material]:
        return next((m for m in self._materials if m.id == material_id), None)
    
    def get_loan(self, loan_id: str) -> Optional[Loan]:
        return next((l for l in self._loans if l.id == loan_id), None)
    
    def add_user(self, user: User) -> None:
        self._users.append(user)
    
    def add_material(self, material: Material) -> None:
        self._materials.append(material)
    
    def add_loan(self, loan: Loan) -> None:
        self._loans.append(loan)
    
    def update_loan(self, loan: Loan) -> None:
        self._loans = [loan if l.id == loan.id else l for l in self._loans]
    
    def replace(self, collections: Dict[str, list]) -> None:
        """Swap in whole collections keyed by users/materials/loans."""
        if "users" in collections:
            self._users = list(collections["users"])
        if "materials" in collections:
            self._materials = list(collections["materials"])
        if "loans" in collections:
            self._loans = list(collections["loans"])
    
    def __eq__(self, other):
        if not isinstance(other, RecordStore):
            return NotImplemented
        return (
            self._users == other._users
            and self._materials == other._materials
            and self._loans == other._loans
        )
