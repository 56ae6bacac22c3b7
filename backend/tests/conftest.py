"""Pytest fixtures — a fresh in-memory store per test."""
import pytest
from fastapi.testclient import TestClient

from eventgraph.main import create_app
from eventgraph.seed import seed_store
from eventgraph.store import EntityStore


@pytest.fixture(scope="function")
def store():
    """Store loaded with the initial data set."""
    return seed_store(EntityStore())


@pytest.fixture(scope="function")
def empty_store():
    return EntityStore()


@pytest.fixture(scope="function")
def client(store):
    """TestClient for an app that owns this test's store."""
    app = create_app(store=store)
    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# Helper: run a GraphQL operation, returns the JSON response dict
# ---------------------------------------------------------------------------
def gql(client: TestClient, query: str, **variables) -> dict:
    """Helper — POST /graphql and return response JSON."""
    resp = client.post("/graphql", json={"query": query, "variables": variables})
    assert resp.status_code == 200, resp.text
    return resp.json()
