"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from app.api.routes import balance, settlements

api_router = APIRouter()

# Include all route modules
api_router.include_router(balance.router)
api_router.include_router(settlements.router)
