from typing import Optional

from pydantic import BaseModel


class CheeseCreate(BaseModel):
    """
    Cheese creation request body

    Every field is optional here: the endpoint checks presence itself
    (400) and then validates this model in strict mode.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None


class CheeseUpdate(BaseModel):
    """
    Cheese update request body, any subset of the fields
    """
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
