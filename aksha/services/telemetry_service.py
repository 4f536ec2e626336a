"""Backend telemetry: location uploads, SOS flagging, unsafe-location reports."""

from __future__ import annotations

from typing import Any

from aksha.core.alert_policies import BACKEND_SOS_MESSAGE
from aksha.schemas.alert import BackendAck
from aksha.schemas.location import LocationSample
from aksha.services.api_client import ApiClient


def location_payload(sample: LocationSample) -> dict[str, Any]:
    """Backend location shape: GeoJSON-style [lng, lat] plus optional extras."""
    payload: dict[str, Any] = {
        "coordinates": [sample.longitude, sample.latitude],
        "timestamp": int(sample.captured_at.timestamp() * 1000),
    }
    for key, value in (
        ("accuracy", sample.accuracy_meters),
        ("altitude", sample.altitude),
        ("heading", sample.heading),
        ("speed", sample.speed),
    ):
        if value is not None:
            payload[key] = value
    return payload


class TelemetryService:
    def __init__(self, api: ApiClient, api_prefix: str = "/api/v1") -> None:
        self.api = api
        self.api_prefix = api_prefix

    async def update_location(self, sample: LocationSample) -> BackendAck:
        data = await self.api.post(
            f"{self.api_prefix}/users/location",
            {"location": location_payload(sample)},
        )
        return _ack(data)

    async def trigger_sos(self, sample: LocationSample | None, message: str = BACKEND_SOS_MESSAGE) -> BackendAck:
        """Flag the SOS server-side. The location is omitted when unknown."""
        body: dict[str, Any] = {"message": message}
        if sample is not None:
            body["location"] = location_payload(sample)
        data = await self.api.post(f"{self.api_prefix}/alerts/sos", body)
        return _ack(data)

    async def end_sos(self) -> BackendAck:
        data = await self.api.post(f"{self.api_prefix}/alerts/sos/end", {})
        return _ack(data)

    async def report_unsafe_location(self, sample: LocationSample, description: str) -> BackendAck:
        data = await self.api.post(
            f"{self.api_prefix}/alerts/unsafe",
            {"location": location_payload(sample), "description": description},
        )
        return _ack(data)


def _ack(data: Any) -> BackendAck:
    if isinstance(data, dict):
        return BackendAck(
            success=bool(data.get("success", True)),
            message=str(data.get("message", "")),
        )
    return BackendAck()
