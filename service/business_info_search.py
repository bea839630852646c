# service/business_info_search.py
"""
사업자 정보 통합검색 / 날짜 범위 검색.

- search: 13개 문자열 필드 + 등록일/수정일(문자열) LIKE '%keyword%' OR 검색.
  키워드가 날짜 형태(YYYY-MM-DD, YYYY/MM/DD)면 DATE(등록일/수정일) 비교도 OR 로 추가.
- search_by_date_range: 등록일이 [start 00:00, end 00:00] 사이인 레코드.
삭제(is_deleted) 레코드는 항상 제외.
"""
from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from core import config
from crud import business_info as crud
from service.date_formatter import format_business_info_array_dates

log = logging.getLogger("business_info.search")

DATE_PATTERN = re.compile(r"^\d{4}[-/]\d{1,2}[-/]\d{1,2}$", re.ASCII)
DATE_FORMAT_ERROR_MESSAGE = "날짜 형식이 올바르지 않습니다. (YYYY-MM-DD 또는 YYYY/MM/DD)"


class DateFormatError(ValueError):
    """날짜 입력값 형식 오류 (클라이언트 입력 오류)."""

    def __init__(self, message: str = DATE_FORMAT_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


def is_date_search(keyword: str) -> bool:
    return DATE_PATTERN.fullmatch(keyword) is not None


def parse_date(value: str) -> date:
    """'2024-1-5', '2024/01/05' → date. 달력상 없는 날짜는 ValueError."""
    y, m, d = re.split(r"[-/]", value)
    return date(int(y), int(m), int(d))


def to_instant(value: str) -> datetime:
    """날짜 문자열 → SEARCH_TIMEZONE 기준 자정 시각."""
    return datetime.combine(parse_date(value), datetime.min.time(), tzinfo=ZoneInfo(config.SEARCH_TIMEZONE))


def _offset(page: int, limit: int) -> int:
    return max(page - 1, 0) * limit


def _result(rows, total: int, page: int, limit: int) -> Dict[str, Any]:
    return {
        "data": format_business_info_array_dates(rows),
        "total": total,
        "page": page,
        "limit": limit,
    }


# 통합검색 - 가장 많이 사용되는 검색
def search(db: Session, keyword: str, page: int = 1, limit: int = 10) -> Dict[str, Any]:
    trimmed = keyword.strip()

    search_date: Optional[date] = None
    if is_date_search(trimmed):
        try:
            search_date = parse_date(trimmed)
        except ValueError:
            # 형태만 날짜인 키워드는 문자열 매칭만
            log.debug("date-shaped keyword is not a calendar date: %r", trimmed)

    rows, total = crud.search_by_keyword(
        db, trimmed, search_date, offset=_offset(page, limit), limit=limit
    )
    log.info("search keyword=%r date=%s page=%s limit=%s total=%s", trimmed, search_date, page, limit, total)
    return _result(rows, total, page, limit)


def validate_date_range(start_date: str, end_date: str) -> None:
    if not is_date_search(start_date) or not is_date_search(end_date):
        log.warning("invalid date range format start=%r end=%r", start_date, end_date)
        raise DateFormatError()


# 날짜 범위 검색
def search_by_date_range(
    db: Session,
    start_date: str,
    end_date: str,
    page: int = 1,
    limit: int = 10,
) -> Dict[str, Any]:
    validate_date_range(start_date, end_date)
    # 2024-02-31 같은 일자 넘침도 3월로 넘기지 않고 형식 오류로 거절
    try:
        start, end = to_instant(start_date), to_instant(end_date)
    except ValueError as e:
        log.warning("date range is not a calendar date start=%r end=%r", start_date, end_date)
        raise DateFormatError() from e

    rows, total = crud.search_by_created_range(
        db, start, end, offset=_offset(page, limit), limit=limit
    )
    log.info("date-range search start=%s end=%s page=%s limit=%s total=%s", start, end, page, limit, total)
    return _result(rows, total, page, limit)
