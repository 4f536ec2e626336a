"""Location and device telemetry schemas."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LocationSample(BaseModel):
    """A single GPS fix reported by the device. Immutable once captured."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    accuracy_meters: float | None = Field(default=None, ge=0)
    altitude: float | None = None
    heading: float | None = None
    speed: float | None = None
    captured_at: datetime = Field(default_factory=_utcnow)

    model_config = {"frozen": True}


class BatteryReading(BaseModel):
    percent: int = Field(ge=0, le=100)
    is_charging: bool = False

    model_config = {"frozen": True}


class PermissionsUpdate(BaseModel):
    location: bool


class LocationPushResponse(BaseModel):
    status: str = "ok"
    uploaded: bool = False


class TrackingStatus(BaseModel):
    is_tracking: bool
    started_at: datetime | None = None
    last_location: LocationSample | None = None


class UnsafeLocationReport(BaseModel):
    description: str = Field(min_length=1, max_length=1000)
    location: LocationSample | None = Field(
        default=None, description="Defaults to the last known device location"
    )
