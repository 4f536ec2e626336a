"""Live location sharing API."""

from fastapi import APIRouter, Depends, HTTPException, status

from aksha.core.deps import get_location_feed, get_tracking_session
from aksha.schemas.location import TrackingStatus
from aksha.services.location_service import DeviceLocationFeed
from aksha.services.tracking_service import TrackingSession

router = APIRouter(prefix="/tracking", tags=["tracking"])


def _status(tracking: TrackingSession, feed: DeviceLocationFeed) -> TrackingStatus:
    return TrackingStatus(
        is_tracking=tracking.is_tracking,
        started_at=tracking.started_at,
        last_location=feed.last_known,
    )


@router.get("", response_model=TrackingStatus)
def get_tracking(
    tracking: TrackingSession = Depends(get_tracking_session),
    feed: DeviceLocationFeed = Depends(get_location_feed),
):
    return _status(tracking, feed)


@router.post("/start", response_model=TrackingStatus)
def start_tracking(
    tracking: TrackingSession = Depends(get_tracking_session),
    feed: DeviceLocationFeed = Depends(get_location_feed),
):
    """Start sharing live location with trusted contacts."""
    if not feed.permission_granted:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Location permission is needed to share your location.",
        )
    tracking.start()
    return _status(tracking, feed)


@router.post("/stop", response_model=TrackingStatus)
def stop_tracking(
    tracking: TrackingSession = Depends(get_tracking_session),
    feed: DeviceLocationFeed = Depends(get_location_feed),
):
    tracking.stop()
    return _status(tracking, feed)
