"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from aksha.core.config import settings
from aksha.core.ws_manager import ws_manager
from aksha.db.session import get_db
from aksha.services.api_client import ApiClient
from aksha.services.auth_service import AuthService
from aksha.services.chat_service import ChatService
from aksha.services.contact_service import ContactBook, contact_book
from aksha.services.device_state import DeviceState, device_state
from aksha.services.dispatch_service import SmsLinkDispatcher
from aksha.services.location_service import DeviceLocationFeed, location_feed
from aksha.services.secure_store import SecureStore
from aksha.services.telemetry_service import TelemetryService
from aksha.services.tracking_service import TrackingSession, tracking_session


def get_contact_book() -> ContactBook:
    return contact_book


def get_location_feed() -> DeviceLocationFeed:
    return location_feed


def get_device_state() -> DeviceState:
    return device_state


def get_tracking_session() -> TrackingSession:
    return tracking_session


def get_dispatcher() -> SmsLinkDispatcher:
    return SmsLinkDispatcher(ws_manager, separator=settings.sms_number_separator)


def get_secure_store(db: Annotated[Session, Depends(get_db)]) -> SecureStore:
    return SecureStore(db, settings.secure_store_secret)


def get_api_client(store: Annotated[SecureStore, Depends(get_secure_store)]) -> ApiClient:
    return ApiClient(settings.api_url, store, timeout=settings.api_timeout_seconds)


def get_auth_service(
    api: Annotated[ApiClient, Depends(get_api_client)],
    store: Annotated[SecureStore, Depends(get_secure_store)],
) -> AuthService:
    return AuthService(api, store, api_prefix=settings.api_prefix)


def get_telemetry_service(api: Annotated[ApiClient, Depends(get_api_client)]) -> TelemetryService:
    return TelemetryService(api, api_prefix=settings.api_prefix)


def get_chat_service(api: Annotated[ApiClient, Depends(get_api_client)]) -> ChatService:
    return ChatService(
        api,
        chat_path=settings.chat_path,
        emergency_path=settings.emergency_path,
        models_path=settings.models_path,
        default_model=settings.chat_default_model,
    )
