"""
Core Services Module

Basic CRUD services for the cheese resource.
"""

from app.services.core.cheese_service import CheeseService, CHEESE_CATALOG

__all__ = ["CheeseService", "CHEESE_CATALOG"]
