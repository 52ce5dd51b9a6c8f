"""
Cheese API endpoints

Six routes over the cheese resource. Each handler is its own error
boundary: failures are logged and turned into a JSON ``{"error": ...}``
response, so nothing escapes to the global error middleware.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from app.api.dependencies import get_cheese_service
from app.infrastructure.exceptions import ErrorCode, InfrastructureError
from app.infrastructure.response import (
    error_response,
    json_response,
    no_content_response,
    not_found_response,
)
from app.schemas.cheese import CheeseCreate, CheeseUpdate
from app.services import CheeseService

logger = logging.getLogger(__name__)

router = APIRouter()


def _is_not_found(error: Exception) -> bool:
    return isinstance(error, InfrastructureError) and error.code == ErrorCode.NOT_FOUND


def _body_fields(body: Any) -> Dict[str, Any]:
    # Non-object JSON bodies (arrays, scalars, null) carry no fields
    return body if isinstance(body, dict) else {}


# List cheeses
@router.get("")
async def get_all_cheeses(
        service: CheeseService = Depends(get_cheese_service),
):
    """
    List every cheese

    Returns:
        200 with a JSON array of cheeses
    """
    try:
        cheeses = await service.get_all()
        return json_response(cheeses, status_code=200)
    except Exception as e:
        logger.error(f"Error fetching cheeses: {str(e)}")
        return error_response("Error fetching cheeses", status_code=500)


# Cheese detail
@router.get("/{cheese_id}")
async def get_cheese_by_id(
        cheese_id: str,  # passed through as-is
        service: CheeseService = Depends(get_cheese_service),
):
    """
    Fetch one cheese

    Returns:
        200 with the cheese, or 404 ``{"error": "Cheese not found"}``
    """
    try:
        cheese = await service.get_by_id(cheese_id)
        if not cheese:
            return not_found_response("Cheese")
        return json_response(cheese, status_code=200)
    except Exception as e:
        logger.error(f"Error fetching cheese {cheese_id}: {str(e)}")
        return error_response("Error fetching cheese", status_code=500)


# Create cheese
@router.post("")
async def create_cheese(
        body: Any = Body(default=None),
        service: CheeseService = Depends(get_cheese_service),
):
    """
    Create a cheese

    ``name`` and ``description`` must be non-empty; ``price`` only has to
    be present, so a price of 0 is accepted.

    Returns:
        201 with the created cheese, or 400 when a field is missing
    """
    try:
        fields = _body_fields(body)
        if not fields.get("name") or not fields.get("description") or "price" not in fields:
            return error_response("Missing required fields", status_code=400)

        # Wrong field types fail here, inside the handler's own error path
        payload = CheeseCreate.model_validate(fields, strict=True)

        new_cheese = await service.create(payload.name, payload.description, payload.price)
        return json_response(new_cheese, status_code=201)
    except Exception as e:
        logger.error(f"Error creating cheese: {str(e)}")
        return error_response("Error creating cheese", status_code=500)


# Update cheese
@router.put("/{cheese_id}")
async def update_cheese(
        cheese_id: str,
        body: Any = Body(default=None),
        service: CheeseService = Depends(get_cheese_service),
):
    """
    Update any subset of name, description and price

    Returns:
        200 with the updated cheese, or 404 when the id does not exist
    """
    try:
        payload = CheeseUpdate.model_validate(_body_fields(body), strict=True)
        updated_cheese = await service.update(
            cheese_id, payload.name, payload.description, payload.price
        )
        return json_response(updated_cheese, status_code=200)
    except Exception as e:
        if _is_not_found(e):
            return not_found_response("Cheese")
        logger.error(f"Error updating cheese {cheese_id}: {str(e)}")
        return error_response("Error updating cheese", status_code=500)


# Delete cheese
@router.delete("/{cheese_id}")
async def delete_cheese(
        cheese_id: str,
        service: CheeseService = Depends(get_cheese_service),
):
    """
    Delete a cheese

    Returns:
        204 with an empty body, or 404 when the id does not exist
    """
    try:
        await service.delete(cheese_id)
        return no_content_response()
    except Exception as e:
        if _is_not_found(e):
            return not_found_response("Cheese")
        logger.error(f"Error deleting cheese {cheese_id}: {str(e)}")
        return error_response("Error deleting cheese", status_code=500)


# Reseed the reference catalog
@router.post("/init")
async def initialize_database(
        service: CheeseService = Depends(get_cheese_service),
):
    """
    Replace all cheeses with the reference catalog

    Returns:
        200 ``{"message": ..., "cheeses": [...]}``
    """
    try:
        count = await service.reseed()
        cheeses = await service.get_all()
        return json_response(
            {
                "message": f"Initialized database with {count} cheese entries.",
                "cheeses": cheeses,
            },
            status_code=200,
        )
    except Exception as e:
        logger.error(f"Error initializing database: {str(e)}")
        return error_response("Error initializing database", status_code=500)
