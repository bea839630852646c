# config.py
import os
from dotenv import load_dotenv

# 0) .env 로드
load_dotenv()

# 1) DB
DB = os.getenv("DB", "postgresql")
DB_USER = os.getenv("DB_USER", "")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_SERVER = os.getenv("DB_SERVER", "")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME", "")
DB_ECHO = bool(int(os.getenv("DB_ECHO", "0")))

# 2) 검색 페이지네이션
SEARCH_DEFAULT_LIMIT = int(os.getenv("SEARCH_DEFAULT_LIMIT", "10"))
SEARCH_MAX_LIMIT = int(os.getenv("SEARCH_MAX_LIMIT", "100"))

# 3) 날짜·시간대
SEARCH_TIMEZONE = os.getenv("SEARCH_TIMEZONE", "Asia/Seoul")  # 날짜 범위 → 시각 변환 기준
DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", SEARCH_TIMEZONE)
DATE_DISPLAY_FORMAT = os.getenv("DATE_DISPLAY_FORMAT", "%Y-%m-%d %H:%M:%S")

# 4) 서버·로그
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5002"))
RELOAD = bool(int(os.getenv("RELOAD", "0")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
