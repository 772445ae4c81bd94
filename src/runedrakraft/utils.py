from datetime import datetime


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit value to the closed interval [lower, upper]."""
    return min(upper, max(lower, value))

def format_timestamp(moment: datetime) -> str:
    """Render a timestamp as 'M/D/YYYY, h:MM AM'."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{moment.month}/{moment.day}/{moment.year}, {hour}:{moment.minute:02d} {suffix}"
