"""SOS API: compose the alert, hand it to the device, flag it on the backend."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from aksha.core.config import settings
from aksha.core.deps import (
    get_contact_book,
    get_device_state,
    get_dispatcher,
    get_location_feed,
    get_telemetry_service,
)
from aksha.schemas.alert import BackendAck, SosResponse
from aksha.services.alert_composer import alert_recipients, compose_alert
from aksha.services.api_client import ApiError
from aksha.services.contact_service import ContactBook
from aksha.services.device_state import DeviceState
from aksha.services.dispatch_service import SmsLinkDispatcher
from aksha.services.location_service import LocationProvider, acquire_location
from aksha.services.telemetry_service import TelemetryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sos", tags=["sos"])


@router.post("", response_model=SosResponse)
async def trigger_sos(
    book: ContactBook = Depends(get_contact_book),
    provider: LocationProvider = Depends(get_location_feed),
    state: DeviceState = Depends(get_device_state),
    dispatcher: SmsLinkDispatcher = Depends(get_dispatcher),
    telemetry: TelemetryService = Depends(get_telemetry_service),
):
    """Send the SOS text to the selected emergency contacts."""
    selected = book.selected()
    if not alert_recipients(selected):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No emergency contacts selected. Add a contact with a phone number to send an SOS.",
        )

    location = await acquire_location(provider, settings.location_timeout_seconds)
    alert = compose_alert(selected, location, state.battery)
    result = await dispatcher.send_text(alert.recipients, alert.body)

    backend_notified = True
    try:
        await telemetry.trigger_sos(location)
    except ApiError as exc:
        logger.warning("Could not flag SOS on the backend: %s", exc)
        backend_notified = False

    logger.info(
        "SOS for %s recipient(s): dispatched=%s location=%s",
        len(alert.recipients),
        result.dispatched,
        "yes" if location else "unavailable",
    )
    return SosResponse(
        dispatched=result.dispatched,
        sms_uri=result.uri,
        body=alert.body,
        recipients=alert.recipients,
        location=location,
        backend_notified=backend_notified,
    )


@router.post("/end", response_model=BackendAck)
async def end_sos(telemetry: TelemetryService = Depends(get_telemetry_service)):
    """Clear the server-side SOS flag."""
    try:
        return await telemetry.end_sos()
    except ApiError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
