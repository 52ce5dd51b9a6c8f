from fastapi import APIRouter

from app.api.v1.endpoints import cheeses


api_router = APIRouter()

# Module routers
api_router.include_router(cheeses.router, prefix="/cheeses", tags=["cheeses"])
