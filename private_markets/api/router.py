from fastapi import APIRouter

from private_markets.api.endpoints import analytics, funds, health, investments, investors

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(funds.router, prefix="/funds", tags=["funds"])
api_router.include_router(investments.router, prefix="/funds", tags=["investments"])
api_router.include_router(analytics.router, prefix="/funds", tags=["analytics"])
api_router.include_router(investors.router, prefix="/investors", tags=["investors"])
