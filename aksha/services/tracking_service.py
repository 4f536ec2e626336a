"""Live location sharing with trusted contacts."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from aksha.schemas.location import LocationSample
from aksha.services.api_client import ApiError
from aksha.services.telemetry_service import TelemetryService

logger = logging.getLogger(__name__)


class TrackingSession:
    """While active, every device location sample is uploaded to the backend."""

    def __init__(self) -> None:
        self.is_tracking = False
        self.started_at: datetime | None = None

    def start(self) -> None:
        if not self.is_tracking:
            self.is_tracking = True
            self.started_at = datetime.now(timezone.utc)
            logger.info("Location sharing started")

    def stop(self) -> None:
        if self.is_tracking:
            self.is_tracking = False
            self.started_at = None
            logger.info("Location sharing stopped")

    async def share(self, sample: LocationSample, telemetry: TelemetryService) -> bool:
        """Upload sample if sharing is on. Returns whether it was uploaded."""
        if not self.is_tracking:
            return False
        try:
            await telemetry.update_location(sample)
        except ApiError as exc:
            logger.warning("Location upload failed: %s", exc)
            return False
        return True


# Singleton instance used across the app
tracking_session = TrackingSession()
