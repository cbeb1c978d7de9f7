from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from .config import settings


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def to_local(dt: datetime) -> datetime:
    if settings.timezone:
        return dt.astimezone(ZoneInfo(settings.timezone))
    return dt.astimezone()


def format_ctime(dt: datetime) -> str:
    """C ``ctime`` layout without the trailing newline: ``Thu Aug 10 14:22:01 2023``."""
    return dt.ctime()
