"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from creator_finance.api.routes import auth, users, dashboard, transactions, platforms

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(dashboard.router)
api_router.include_router(transactions.router)
api_router.include_router(platforms.router)
