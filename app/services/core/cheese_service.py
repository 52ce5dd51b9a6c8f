import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.exceptions import RecordNotFoundError
from app.models.cheese import Cheese

logger = logging.getLogger(__name__)

# Reference catalog written by reseed()
CHEESE_CATALOG: List[Dict[str, Any]] = [
    {
        "name": "Gouda",
        "description": "A mild-flavored cheese from the Netherlands.",
        "price": 12.99,
    },
    {
        "name": "Cheddar",
        "description": "A popular cheese with a sharp taste.",
        "price": 10.49,
    },
    {
        "name": "Brie",
        "description": "A soft cheese with a creamy texture.",
        "price": 14.99,
    },
    {
        "name": "Blue Cheese",
        "description": "A cheese with blue veins and a strong flavor.",
        "price": 15.99,
    },
    {
        "name": "Parmesan",
        "description": "A hard, granular cheese often used for grating.",
        "price": 13.49,
    },
]


class CheeseService:
    """
    Data access for the cheese resource

    Holds only the request's session; every call goes to the database.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self) -> List[Dict[str, Any]]:
        result = await self.db.execute(select(Cheese))
        return [cheese.to_dict() for cheese in result.scalars().all()]

    async def get_by_id(self, cheese_id: str) -> Optional[Dict[str, Any]]:
        """
        Return the cheese or None; a missing row is not an error here
        """
        cheese = await self.db.get(Cheese, cheese_id)
        return cheese.to_dict() if cheese else None

    async def create(self, name: str, description: str, price: float) -> Dict[str, Any]:
        try:
            new_cheese = Cheese(name=name, description=description, price=price)
            self.db.add(new_cheese)
            await self.db.commit()
            # Pick up the generated id
            await self.db.refresh(new_cheese)
            logger.info(f"Created cheese {new_cheese.id}")
            return new_cheese.to_dict()
        except Exception as e:
            await self.db.rollback()
            raise e

    async def update(
            self,
            cheese_id: str,
            name: Optional[str] = None,
            description: Optional[str] = None,
            price: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Apply the truthy fields to an existing cheese

        Falsy values (None, "", 0) leave the stored field unchanged, so a
        price of 0 or an empty description cannot be written through here.

        Raises:
            RecordNotFoundError: no cheese has this id
        """
        try:
            cheese = await self.db.get(Cheese, cheese_id)
            if cheese is None:
                raise RecordNotFoundError("Cheese", cheese_id)

            if name:
                cheese.name = name
            if description:
                cheese.description = description
            if price:
                cheese.price = price

            await self.db.commit()
            await self.db.refresh(cheese)
            return cheese.to_dict()
        except Exception as e:
            await self.db.rollback()
            raise e

    async def delete(self, cheese_id: str) -> Dict[str, Any]:
        """
        Remove a cheese and return the row as it was before deletion

        Raises:
            RecordNotFoundError: no cheese has this id
        """
        try:
            cheese = await self.db.get(Cheese, cheese_id)
            if cheese is None:
                raise RecordNotFoundError("Cheese", cheese_id)

            removed = cheese.to_dict()
            await self.db.delete(cheese)
            await self.db.commit()
            logger.info(f"Deleted cheese {cheese_id}")
            return removed
        except Exception as e:
            await self.db.rollback()
            raise e

    async def reseed(self) -> int:
        """
        Wipe the table and insert CHEESE_CATALOG

        Returns:
            int: number of cheeses inserted
        """
        try:
            await self.db.execute(delete(Cheese))
            self.db.add_all([Cheese(**entry) for entry in CHEESE_CATALOG])
            await self.db.commit()
            count = len(CHEESE_CATALOG)
            logger.info(f"Reseeded cheese table with {count} entries")
            return count
        except Exception as e:
            await self.db.rollback()
            raise e
