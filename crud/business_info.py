# crud/business_info.py
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, List, Tuple

from sqlalchemy import Date, String, and_, cast, func, or_, select
from sqlalchemy.orm import Session

from models.business_info import BusinessInfo

log = logging.getLogger("business_info.crud")

# 통합검색 대상 문자열 컬럼
SEARCHABLE_COLUMNS = (
    BusinessInfo.business_name,
    BusinessInfo.business_number,
    BusinessInfo.business_type,
    BusinessInfo.business_ceo,
    BusinessInfo.business_item,
    BusinessInfo.corporate_registration_number,
    BusinessInfo.business_tel,
    BusinessInfo.business_mobile,
    BusinessInfo.business_ceo_email,
    BusinessInfo.business_fax,
    BusinessInfo.business_zipcode,
    BusinessInfo.business_address,
    BusinessInfo.business_address_detail,
)

# 문자열로 캐스팅해 LIKE, 날짜 키워드면 DATE() 비교까지
DATE_COLUMNS = (
    BusinessInfo.created_at,
    BusinessInfo.updated_at,
)


def _not_deleted():
    return BusinessInfo.is_deleted.is_(False)


def keyword_conditions(keyword: str, search_date: Optional[date] = None) -> list:
    """키워드 부분 매칭(LIKE, 대소문자 구분) 조건 목록. 모두 OR 로 묶인다."""
    pattern = f"%{keyword}%"
    conds = [col.like(pattern) for col in SEARCHABLE_COLUMNS]
    conds += [cast(col, String).like(pattern) for col in DATE_COLUMNS]
    if search_date is not None:
        conds += [func.date(col, type_=Date) == search_date for col in DATE_COLUMNS]
    return conds


def _page(db: Session, where, order_by, *, offset: int, limit: int) -> Tuple[List[BusinessInfo], int]:
    stmt = (
        select(BusinessInfo)
        .where(where)
        .order_by(*order_by)
        .offset(offset)
        .limit(limit)
    )
    rows = db.execute(stmt).scalars().all()
    total = db.execute(
        select(func.count()).select_from(BusinessInfo).where(where)
    ).scalar_one()
    log.debug("business_info page offset=%s limit=%s rows=%s total=%s", offset, limit, len(rows), total)
    return rows, total


def search_by_keyword(
    db: Session,
    keyword: str,
    search_date: Optional[date] = None,
    *,
    offset: int = 0,
    limit: int = 10,
) -> Tuple[List[BusinessInfo], int]:
    """삭제되지 않은 레코드 중 키워드 매칭. 상호명 오름차순."""
    where = and_(_not_deleted(), or_(*keyword_conditions(keyword, search_date)))
    return _page(
        db,
        where,
        (BusinessInfo.business_name.asc(), BusinessInfo.id.asc()),
        offset=offset,
        limit=limit,
    )


def search_by_created_range(
    db: Session,
    start: datetime,
    end: datetime,
    *,
    offset: int = 0,
    limit: int = 10,
) -> Tuple[List[BusinessInfo], int]:
    """start <= created_at <= end. 등록일 내림차순."""
    where = and_(
        _not_deleted(),
        BusinessInfo.created_at >= start,
        BusinessInfo.created_at <= end,
    )
    return _page(
        db,
        where,
        (BusinessInfo.created_at.desc(), BusinessInfo.id.desc()),
        offset=offset,
        limit=limit,
    )
