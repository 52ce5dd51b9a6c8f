"""
API Dependencies

Provides dependency injection for services and database sessions.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.services import CheeseService


def get_cheese_service(db: AsyncSession = Depends(get_db)) -> CheeseService:
    """
    Get Cheese Service instance bound to the request's database session

    Returns:
        CheeseService: Configured cheese service
    """
    return CheeseService(db=db)
