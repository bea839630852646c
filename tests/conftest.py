"""
테스트 공통 설정: 인메모리 SQLite + get_db 오버라이드
"""
import os

# 모듈 import 전에 환경변수 고정
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEARCH_TIMEZONE"] = "Asia/Seoul"
os.environ["DISPLAY_TIMEZONE"] = "Asia/Seoul"
os.environ["DATE_DISPLAY_FORMAT"] = "%Y-%m-%d %H:%M:%S"

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from database.base import Base
from database.session import get_db
from models.business_info import BusinessInfo

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(engine, "connect")
def _case_sensitive_like(dbapi_conn, _record):
    # PostgreSQL LIKE 와 동일하게 대소문자 구분
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def records(db):
    rows = [
        BusinessInfo(
            business_name="Alpha Foods",
            business_number="1012345678",
            business_ceo="Lee",
            business_item="food",
            business_tel="051-111-2222",
            business_address="부산광역시 해운대구",
            created_at=datetime(2024, 1, 1, 0, 0, 0),
            updated_at=datetime(2024, 1, 20, 10, 0, 0),
        ),
        BusinessInfo(
            business_name="Beta Logistics",
            business_number="2208765432",
            business_item="Logistics",
            business_ceo_email="ops@beta.io",
            created_at=datetime(2024, 1, 31, 0, 0, 0),
            updated_at=datetime(2024, 1, 31, 0, 0, 0),
        ),
        BusinessInfo(
            business_name="Charlie Books",
            business_zipcode="06236",
            business_address="서울특별시 강남구 테헤란로",
            created_at=datetime(2024, 1, 31, 9, 0, 0),
            updated_at=datetime(2024, 3, 5, 14, 0, 0),
        ),
        BusinessInfo(
            business_name="Delta Mart",
            business_mobile="010-9999-0000",
            created_at=datetime(2023, 12, 31, 23, 59, 0),
            updated_at=datetime(2024, 1, 15, 8, 0, 0),
        ),
        BusinessInfo(
            business_name="Garam Trading",
            business_ceo="김철수",
            corporate_registration_number="110111-1234567",
            business_fax="02-555-0000",
            business_address="서울특별시 강남구 역삼동",
            business_address_detail="3층",
            created_at=datetime(2024, 1, 15, 10, 0, 0),
            updated_at=datetime(2024, 2, 1, 9, 0, 0),
        ),
        BusinessInfo(
            business_name="Deleted Corp",
            business_type="Alpha",
            is_deleted=True,
            created_at=datetime(2024, 1, 15, 12, 0, 0),
            updated_at=datetime(2024, 1, 15, 12, 0, 0),
        ),
    ]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture
def client(db):
    from main import app

    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
