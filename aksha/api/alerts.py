"""Unsafe location reports."""

from fastapi import APIRouter, Depends, HTTPException, status

from aksha.core.deps import get_location_feed, get_telemetry_service
from aksha.schemas.alert import BackendAck
from aksha.schemas.location import UnsafeLocationReport
from aksha.services.api_client import ApiError
from aksha.services.location_service import DeviceLocationFeed
from aksha.services.telemetry_service import TelemetryService

router = APIRouter(prefix="/alerts", tags=["alerts"])


@router.post("/unsafe", response_model=BackendAck)
async def report_unsafe(
    data: UnsafeLocationReport,
    feed: DeviceLocationFeed = Depends(get_location_feed),
    telemetry: TelemetryService = Depends(get_telemetry_service),
):
    """Report an unsafe place. Uses the last known location when none is given."""
    location = data.location or feed.last_known
    if location is None:
        if not feed.permission_granted:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Permission to access location was denied",
            )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Location unavailable")
    try:
        return await telemetry.report_unsafe_location(location, data.description)
    except ApiError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
