from fastapi import APIRouter, FastAPI
from app.endpoints import business_info

router = APIRouter()

router.include_router(business_info.router)

def register_routers(app: FastAPI) -> None:
    app.include_router(router)
