"""
Services Layer

Business operations on top of the persistence layer.
"""

from app.services.core import CheeseService, CHEESE_CATALOG

__all__ = ["CheeseService", "CHEESE_CATALOG"]
