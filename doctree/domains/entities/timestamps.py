from datetime import datetime, timedelta, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def advance(previous: Optional[datetime]) -> datetime:
    """Текущее время, строго больше предыдущей отметки"""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


def ensure_utc(value: datetime) -> datetime:
    """SQLite возвращает naive datetime - считаем его UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
