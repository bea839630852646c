# schemas/business_info.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class BusinessInfoResponse(BaseModel):
    """검색 결과 한 건. createdAt/updatedAt 은 표시용 문자열."""

    id: int
    business_name: str
    business_number: Optional[str] = None
    business_type: Optional[str] = None
    business_ceo: Optional[str] = None
    business_item: Optional[str] = None
    corporate_registration_number: Optional[str] = None
    business_tel: Optional[str] = None
    business_mobile: Optional[str] = None
    business_ceo_email: Optional[str] = None
    business_fax: Optional[str] = None
    business_zipcode: Optional[str] = None
    business_address: Optional[str] = None
    business_address_detail: Optional[str] = None
    is_deleted: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class SearchResult(BaseModel):
    data: List[BusinessInfoResponse]
    total: int
    page: int
    limit: int
