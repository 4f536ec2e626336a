"""Pytest fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("LOCATION_TIMEOUT_SECONDS", "0.05")
os.environ.setdefault("DEVICE_KEY", "test-device-key")

from typing import Any  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi import Depends  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, delete  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from aksha.core import deps  # noqa: E402
from aksha.core.config import settings  # noqa: E402
from aksha.core.ws_manager import ConnectionManager  # noqa: E402
from aksha.db.base import Base  # noqa: E402
from aksha.db.session import get_db  # noqa: E402
from aksha.main import app  # noqa: E402
from aksha.models import SecureItem  # noqa: E402
from aksha.services.api_client import ApiClient  # noqa: E402
from aksha.services.contact_service import ContactBook  # noqa: E402
from aksha.services.device_state import DeviceState  # noqa: E402
from aksha.services.dispatch_service import SmsLinkDispatcher  # noqa: E402
from aksha.services.location_service import DeviceLocationFeed  # noqa: E402
from aksha.services.secure_store import SecureStore  # noqa: E402
from aksha.services.tracking_service import TrackingSession  # noqa: E402

TEST_DATABASE_URL = "sqlite:///./test.db"
BACKEND_URL = "http://backend.test"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


class FakeBackend:
    """Canned responses for the remote backend, served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], tuple[int, Any]] = {}

    def respond(self, method: str, path: str, status_code: int = 200, json: Any = None) -> None:
        self._routes[(method, path)] = (status_code, json)

    def fail(self, method: str, path: str) -> None:
        """Make the route fail at the transport level."""
        self._routes[(method, path)] = (0, None)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "Not found"})
        status_code, body = route
        if status_code == 0:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(status_code, json=body)

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class RecordingManager(ConnectionManager):
    """Connection manager that pretends `connected` devices received each event."""

    def __init__(self, connected: int = 1) -> None:
        super().__init__()
        self.connected = connected
        self.events: list[tuple[str, Any]] = []

    async def broadcast(self, event: str, data: Any) -> int:
        self.events.append((event, data))
        return self.connected


@pytest.fixture(scope="session")
def setup_db():
    """Create tables once for test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(setup_db):
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.execute(delete(SecureItem))
        session.commit()
        session.close()


@pytest.fixture
def store(db):
    return SecureStore(db, settings.secure_store_secret)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def api(store, backend):
    return ApiClient(BACKEND_URL, store, transport=backend.transport)


@pytest.fixture
def contact_book():
    return ContactBook()


@pytest.fixture
def location_feed():
    return DeviceLocationFeed()


@pytest.fixture
def device_state():
    return DeviceState()


@pytest.fixture
def tracking():
    return TrackingSession()


@pytest.fixture
def devices():
    return RecordingManager()


@pytest.fixture
def client(db, backend, contact_book, location_feed, device_state, tracking, devices):
    """Test client with overridden DB, backend transport and fresh device state."""

    def override_get_api_client(store: SecureStore = Depends(deps.get_secure_store)) -> ApiClient:
        return ApiClient(BACKEND_URL, store, transport=backend.transport)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[deps.get_api_client] = override_get_api_client
    app.dependency_overrides[deps.get_contact_book] = lambda: contact_book
    app.dependency_overrides[deps.get_location_feed] = lambda: location_feed
    app.dependency_overrides[deps.get_device_state] = lambda: device_state
    app.dependency_overrides[deps.get_tracking_session] = lambda: tracking
    app.dependency_overrides[deps.get_dispatcher] = lambda: SmsLinkDispatcher(devices)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
