"""Device telemetry pushed by the device shell."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from aksha.core.deps import (
    get_device_state,
    get_location_feed,
    get_telemetry_service,
    get_tracking_session,
)
from aksha.schemas.location import BatteryReading, LocationPushResponse, LocationSample, PermissionsUpdate
from aksha.services.device_state import DeviceState
from aksha.services.location_service import DeviceLocationFeed
from aksha.services.telemetry_service import TelemetryService
from aksha.services.tracking_service import TrackingSession

router = APIRouter(prefix="/device", tags=["device"])


# async so that pushes resolve pending location requests on the event loop
@router.post("/location", response_model=LocationPushResponse)
async def push_location(
    data: LocationSample,
    feed: DeviceLocationFeed = Depends(get_location_feed),
    tracking: TrackingSession = Depends(get_tracking_session),
    telemetry: TelemetryService = Depends(get_telemetry_service),
):
    """Foreground location watch update. Shared with the backend while tracking is on."""
    feed.push(data)
    uploaded = await tracking.share(data, telemetry)
    return LocationPushResponse(uploaded=uploaded)


@router.post("/battery", response_model=BatteryReading)
def push_battery(data: BatteryReading, state: DeviceState = Depends(get_device_state)):
    state.update_battery(data)
    return data


@router.post("/permissions", response_model=PermissionsUpdate)
async def update_permissions(data: PermissionsUpdate, feed: DeviceLocationFeed = Depends(get_location_feed)):
    feed.permission_granted = data.location
    return data
