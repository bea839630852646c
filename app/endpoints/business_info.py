# app/endpoints/business_info.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from core.config import SEARCH_DEFAULT_LIMIT, SEARCH_MAX_LIMIT
from database.session import get_db
from schemas.business_info import SearchResult
from service import business_info_search as search_service
from service.business_info_search import DateFormatError

router = APIRouter(prefix="/search", tags=["BusinessInfoSearch"])


@router.get("", response_model=SearchResult)
def search(
    keyword: str = Query("", description="상호명/사업자번호/대표자/연락처/주소 등 통합검색"),
    page: int = Query(1, ge=1),
    limit: int = Query(SEARCH_DEFAULT_LIMIT, ge=1, le=SEARCH_MAX_LIMIT),
    db: Session = Depends(get_db),
):
    return search_service.search(db, keyword, page, limit)


@router.get("/date-range", response_model=SearchResult)
def search_by_date_range(
    start_date: str = Query(..., alias="startDate", description="YYYY-MM-DD 또는 YYYY/MM/DD"),
    end_date: str = Query(..., alias="endDate", description="YYYY-MM-DD 또는 YYYY/MM/DD"),
    page: int = Query(1, ge=1),
    limit: int = Query(SEARCH_DEFAULT_LIMIT, ge=1, le=SEARCH_MAX_LIMIT),
    db: Session = Depends(get_db),
):
    try:
        return search_service.search_by_date_range(db, start_date, end_date, page, limit)
    except DateFormatError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
