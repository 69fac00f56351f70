"""
Display helpers used by the page templates.
"""
from datetime import date, datetime, timedelta
import math

WEEKDAYS = [
    {"name": "Monday", "short": "Mon", "is_weekend": False},
    {"name": "Tuesday", "short": "Tue", "is_weekend": False},
    {"name": "Wednesday", "short": "Wed", "is_weekend": False},
    {"name": "Thursday", "short": "Thu", "is_weekend": False},
    {"name": "Friday", "short": "Fri", "is_weekend": False},
    {"name": "Saturday", "short": "Sat", "is_weekend": True},
    {"name": "Sunday", "short": "Sun", "is_weekend": True},
]
WEEKDAY_NAMES = [d["name"] for d in WEEKDAYS]


def format_time(value: str) -> str:
    """24h "HH:MM" to 12h, e.g. 13:30 -> 1:30 PM, 00:15 -> 12:15 AM."""
    try:
        hours, minutes = value.split(":", 1)
        hour = int(hours)
    except (AttributeError, ValueError):
        return value or ""
    suffix = "PM" if hour >= 12 else "AM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minutes} {suffix}"


def format_currency(amount) -> str:
    return f"${float(amount or 0):.2f}"


def format_date(value: str) -> str:
    """YYYY-MM-DD (optionally with a time part) to M/D/YYYY."""
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return value
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def short_day(name: str) -> str:
    for day in WEEKDAYS:
        if day["name"] == name:
            return day["short"]
    return name


def enrollment_percentage(enrolled, capacity) -> int:
    """Rounded half up. A class with no capacity reports 0."""
    if not capacity:
        return 0
    return int(math.floor(enrolled / capacity * 100 + 0.5))


def enrollment_level(percentage: int) -> str:
    if percentage > 75:
        return "error"
    if percentage > 50:
        return "warning"
    return "success"


def greeting(now: datetime = None) -> str:
    hour = (now or datetime.now()).hour
    if hour >= 18:
        return "Good evening"
    if hour >= 12:
        return "Good afternoon"
    return "Good morning"


def parse_tags(raw: str) -> list:
    """Comma separated form input to a list, trimmed, blanks dropped."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def default_member_form(today: date = None) -> dict:
    today = today or date.today()
    return {
        "name": "",
        "email": "",
        "phone": "",
        "joinDate": today.isoformat(),
        "membershipType": "Standard",
        "membershipStatus": "Active",
        "membershipEnd": (today + timedelta(days=30)).isoformat(),
        "emergencyContact": "",
        "age": 18,
        "gender": "Male",
        "goals": "",
    }


def default_trainer_form(today: date = None) -> dict:
    today = today or date.today()
    return {
        "name": "",
        "email": "",
        "phone": "",
        "hireDate": today.isoformat(),
        "specialties": [],
        "certifications": [],
        "bio": "",
        "schedule": "",
        "imageUrl": "",
    }
