import math
from datetime import datetime, timedelta
from typing import Optional
from equipment_loans.models.loan import Loan
from equipment_loans.utils.timezone import as_aware, start_of_day_utc

ONE_DAY = timedelta(days=1)

def return_deadline(loan: Loan) -> Optional[datetime]:
    """Instant after which an open loan counts as overdue (00:00 UTC of the expected date)."""
    if loan.expected_return_date is None:
        return None
    return start_of_day_utc(loan.expected_return_date)

def is_overdue(loan: Loan, now: datetime) -> bool:
    deadline = return_deadline(loan)
    if not loan.is_active or deadline is None:
        return False
    return as_aware(now) > deadline

def days_late(loan: Loan, now: datetime) -> int:
    """Whole days past the deadline, rounded up: one second late is one day late."""
    deadline = return_deadline(loan)
    if not loan.is_active or deadline is None:
        return 0
    late = math.ceil((as_aware(now) - deadline) / ONE_DAY)
    return max(0, late)

def display_status(loan: Loan, now: datetime) -> str:
    """One of returned, overdue, open_ended or active."""
    if not loan.is_active:
        return "returned"
    if is_overdue(loan, now):
        return "overdue"
    if loan.expected_return_date is None:
        return "open_ended"
    return "active"
