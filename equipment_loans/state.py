from equipment_loans.services.tracker import LoanTracker

# The one application state owner; every router writes through it
tracker = LoanTracker()

def get_tracker():
    yield tracker
