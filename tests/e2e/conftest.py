"""Fixtures for end-to-end tests against the in-memory stack."""

from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from inkwell.domain.repository import RoleRepository
from inkwell.domain.service import AuthProvider
from inkwell.domain.value import Role, UserId
from inkwell.interface.api.app import create_app
from tests.di import build_test_container

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "hunter22"


def resolve(client: TestClient, dependency):
    """Fetch an APP-scoped dependency from the app's container."""
    container = client.app.state.dishka_container
    return client.portal.call(container.get, dependency)


def run(client: TestClient, func, *args):
    """Run a coroutine function on the app's event loop."""
    return client.portal.call(func, *args)


@pytest.fixture
def client():
    """Create test client with test container.

    Entered as a context manager so the whole test shares one event loop
    and the lifespan closes the container afterwards.
    """
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    """Test client signed in as an admin."""
    provider = resolve(client, AuthProvider)
    roles = resolve(client, RoleRepository)
    user = provider.add_user(ADMIN_EMAIL, ADMIN_PASSWORD)
    roles.grant(UserId(UUID(user.id)), Role.ADMIN)

    response = client.post(
        "/admin/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    return client
