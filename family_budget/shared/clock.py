import datetime
from zoneinfo import ZoneInfo

from family_budget.config.setting import settings

JA_WEEKDAYS = ["月", "火", "水", "木", "金", "土", "日"]


def local_now() -> datetime.datetime:
    """Current time in the ledger timezone (Asia/Tokyo by default)."""
    return datetime.datetime.now(ZoneInfo(settings.timezone))


def local_today() -> datetime.date:
    return local_now().date()


def format_ja_datetime(moment: datetime.datetime) -> str:
    """Render like ja-JP toLocaleString, e.g. 2024/1/5 9:03:07."""
    return (
        f"{moment.year}/{moment.month}/{moment.day} "
        f"{moment.hour}:{moment.minute:02d}:{moment.second:02d}"
    )


def format_ja_date(day: datetime.date) -> str:
    """Render a date with its weekday, e.g. 2024/01/15(月)."""
    return f"{day.year:04d}/{day.month:02d}/{day.day:02d}({JA_WEEKDAYS[day.weekday()]})"
