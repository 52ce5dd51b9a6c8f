from typing import Dict, Any

from sqlalchemy import Column, VARCHAR, TEXT, Double

from app.db.base import Base
from app.utils.snowflake_id import generate_snowflake_string_id


class Cheese(Base):
    """
    Cheese database model

    The id is assigned on insert and never changes afterwards.
    """
    __tablename__ = "cheese"

    id = Column(VARCHAR(32), primary_key=True, index=True, default=lambda: generate_snowflake_string_id())
    name = Column(VARCHAR(255), nullable=False)
    description = Column(TEXT, nullable=False)
    price = Column(Double, nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
        }
