"""
Error mapping of the cheese endpoints, with the service replaced by stubs.
"""

import pytest

from app.api.dependencies import get_cheese_service
from app.infrastructure.exceptions import InfrastructureError, RecordNotFoundError
from app.main import app


class FailingCheeseService:
    """Every operation raises the configured error."""

    def __init__(self, error: Exception):
        self.error = error

    async def _fail(self, *args, **kwargs):
        raise self.error

    get_all = get_by_id = create = update = delete = reseed = _fail


@pytest.fixture
def use_service():
    def _use(service):
        app.dependency_overrides[get_cheese_service] = lambda: service
    return _use


@pytest.mark.parametrize(
    "method, path, body, message",
    [
        ("GET", "/cheeses", None, "Error fetching cheeses"),
        ("GET", "/cheeses/1", None, "Error fetching cheese"),
        ("POST", "/cheeses", {"name": "Brie", "description": "soft", "price": 14.99}, "Error creating cheese"),
        ("PUT", "/cheeses/1", {"name": "X"}, "Error updating cheese"),
        ("DELETE", "/cheeses/1", None, "Error deleting cheese"),
        ("POST", "/cheeses/init", None, "Error initializing database"),
    ],
)
def test_store_failure_maps_to_500(client, use_service, method, path, body, message):
    use_service(FailingCheeseService(RuntimeError("Database error")))

    r = client.request(method, path, json=body)

    assert r.status_code == 500
    assert r.json() == {"error": message}


@pytest.mark.parametrize("method", ["PUT", "DELETE"])
def test_not_found_code_maps_to_404(client, use_service, method):
    use_service(FailingCheeseService(RecordNotFoundError("Cheese", "1")))

    r = client.request(method, "/cheeses/1", json={"name": "X"} if method == "PUT" else None)

    assert r.status_code == 404
    assert r.json() == {"error": "Cheese not found"}


def test_other_infrastructure_errors_map_to_500(client, use_service):
    use_service(FailingCheeseService(InfrastructureError("connection lost")))

    r = client.put("/cheeses/1", json={"name": "X"})

    assert r.status_code == 500
    assert r.json() == {"error": "Error updating cheese"}


def test_missing_fields_rejected_before_reaching_service(client, use_service):
    use_service(FailingCheeseService(AssertionError("service must not be called")))

    r = client.post("/cheeses", json={"name": "Brie"})

    assert r.status_code == 400
    assert r.json() == {"error": "Missing required fields"}
