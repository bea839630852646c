# models/business_info.py
from sqlalchemy import Column, BigInteger, Integer, String, Boolean, DateTime, Index, func, false
from database.base import Base


class BusinessInfo(Base):
    __tablename__ = "business_info"

    # sqlite 는 INTEGER PK 만 자동 증가
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    business_name = Column(String, nullable=False)
    business_number = Column(String, nullable=True)          # 사업자등록번호
    business_type = Column(String, nullable=True)            # 업태
    business_ceo = Column(String, nullable=True)
    business_item = Column(String, nullable=True)            # 종목
    corporate_registration_number = Column(String, nullable=True)  # 법인등록번호
    business_tel = Column(String, nullable=True)
    business_mobile = Column(String, nullable=True)
    business_ceo_email = Column(String, nullable=True)
    business_fax = Column(String, nullable=True)
    business_zipcode = Column(String, nullable=True)
    business_address = Column(String, nullable=True)
    business_address_detail = Column(String, nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("idx_business_info_business_name", "business_name"),
        Index("idx_business_info_created_at", "created_at"),
    )


__all__ = ["BusinessInfo"]
