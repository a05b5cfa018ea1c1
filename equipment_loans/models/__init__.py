from .user import User
from .material import Material
from .loan import Loan, LoanStatus

__all__ = [
    "User",
    "Material",
    "Loan",
    "LoanStatus",
]
