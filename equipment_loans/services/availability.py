import logging
from typing import Iterable, Optional
from equipment_loans.models.loan import Loan

logger = logging.getLogger(__name__)

def find_active_loan(material_id: str, loans: Iterable[Loan]) -> Optional[Loan]:
    """Return the active loan holding a material, or None if it is available.

    Only a crafted import can produce several active loans for one material;
    the most recent borrow date then wins, and among equal borrow dates the
    first one in store order.
    """
    found: Optional[Loan] = None
    duplicates = 0
    for loan in loans:
        if loan.material_id != material_id or not loan.is_active:
            continue
        if found is None:
            found = loan
            continue
        duplicates += 1
        if loan.borrow_date > found.borrow_date:
            found = loan
    if duplicates:
        logger.debug(f"Material {material_id} has {duplicates + 1} active loans, using loan {found.id}")
    return found

def is_available(material_id: str, loans: Iterable[Loan]) -> bool:
    return find_active_loan(material_id, loans) is None
