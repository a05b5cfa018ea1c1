from datetime import date, datetime, time
import pytz
from equipment_loans.config import settings

LOCAL_TZ = pytz.timezone(settings.timezone)

def now_local() -> datetime:
    """Get current datetime in the configured local timezone."""
    return datetime.now(LOCAL_TZ)

def today_local() -> date:
    return now_local().date()

def as_aware(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; aware ones are returned unchanged."""
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value

def start_of_day_utc(day: date) -> datetime:
    """Midnight UTC at the start of a calendar date."""
    return pytz.utc.localize(datetime.combine(day, time.min))

def to_local(value: datetime) -> datetime:
    return as_aware(value).astimezone(LOCAL_TZ)
