from fastapi import APIRouter

from app.api.v1 import payments, restaurants

api_router = APIRouter()

api_router.include_router(
    restaurants.router, prefix="/restaurants", tags=["restaurants"]
)
api_router.include_router(payments.router, prefix="/payments", tags=["payments"])
