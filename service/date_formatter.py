# service/date_formatter.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional
from zoneinfo import ZoneInfo

from sqlalchemy import inspect

from core import config

DATE_FIELDS = ("created_at", "updated_at")


def format_datetime(value: Optional[datetime], fmt: Optional[str] = None) -> Optional[str]:
    """tz-aware 값은 DISPLAY_TIMEZONE 으로 변환 후 문자열로."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(ZoneInfo(config.DISPLAY_TIMEZONE))
    return value.strftime(fmt or config.DATE_DISPLAY_FORMAT)


def format_business_info_dates(record: Any) -> Dict[str, Any]:
    """ORM 레코드 → dict. 날짜 두 필드만 표시용 문자열로 바꾸고 나머지는 그대로."""
    data = {attr.key: getattr(record, attr.key) for attr in inspect(record).mapper.column_attrs}
    for field in DATE_FIELDS:
        data[field] = format_datetime(data.get(field))
    return data


def format_business_info_array_dates(records: Iterable[Any]) -> List[Dict[str, Any]]:
    return [format_business_info_dates(r) for r in records]
