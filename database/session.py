from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import database.base as base
from core.config import DB_ECHO

engine = create_engine(base.DATABASE_URL, echo=DB_ECHO, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
