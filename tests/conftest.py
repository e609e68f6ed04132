import pytest

from app import create_app
from fakes import FakeClient, FakeState


ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "secret"


@pytest.fixture
def state():
    return FakeState(users={ADMIN_EMAIL: ADMIN_PASSWORD})


@pytest.fixture
def app(state):
    app = create_app(
        config={
            "TESTING": True,
            "SECRET_KEY": "test",
            "SUPABASE_URL": "https://fake.supabase.co",
            "SUPABASE_ANON_KEY": "anon-key",
        },
        client_factory=lambda: FakeClient(state),
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(client):
    r = client.post("/admin/login", data={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert r.status_code == 302
    return client
