import pytest
from fastapi.testclient import TestClient

from catalog_api.app.core.store import CatalogStore
from catalog_api.app.main import create_app
from catalog_api.app.services.catalog_service import CatalogService


@pytest.fixture
def store():
    return CatalogStore.seeded()


@pytest.fixture
def service(store):
    return CatalogService(store)


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def graphql(client):
    """POST a GraphQL document and return the decoded response body."""

    def _execute(query, variables=None):
        payload = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        resp = client.post("/graphql", json=payload)
        return resp.json()

    return _execute
