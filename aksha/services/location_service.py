"""Device location feed and bounded location acquisition."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod

from aksha.schemas.location import LocationSample

logger = logging.getLogger(__name__)


class LocationError(Exception):
    """Raised when the location provider cannot produce a sample."""


class LocationPermissionError(LocationError):
    """Raised when the user has not granted location access."""


class LocationProvider(ABC):
    """Source of GPS fixes. Fresh requests may hang; callers bound them."""

    @abstractmethod
    async def get_current_location(self) -> LocationSample | None:
        ...

    @abstractmethod
    async def get_last_known_location(self) -> LocationSample | None:
        ...


class DeviceLocationFeed(LocationProvider):
    """Location provider fed by samples the device shell pushes.

    A fresh request waits for the next pushed sample. The most recent
    sample is cached as the last known location.
    """

    def __init__(self) -> None:
        self._last: LocationSample | None = None
        self._waiters: list[asyncio.Future[LocationSample]] = []
        self.permission_granted = True

    def push(self, sample: LocationSample) -> None:
        self._last = sample
        waiters, self._waiters = self._waiters, []
        for fut in waiters:
            if not fut.done():
                fut.set_result(sample)

    @property
    def last_known(self) -> LocationSample | None:
        return self._last

    @property
    def pending_requests(self) -> int:
        return len(self._waiters)

    async def get_current_location(self) -> LocationSample | None:
        if not self.permission_granted:
            raise LocationPermissionError("Permission to access location was denied")
        fut: asyncio.Future[LocationSample] = asyncio.get_running_loop().create_future()
        self._waiters.append(fut)
        try:
            return await fut
        finally:
            if fut in self._waiters:
                self._waiters.remove(fut)

    async def get_last_known_location(self) -> LocationSample | None:
        return self._last


async def acquire_location(provider: LocationProvider, timeout_seconds: float) -> LocationSample | None:
    """Prefer a fresh fix, fall back to the cached one, never block past the timeout.

    Returns None when neither is available. Provider failures are logged,
    not raised.
    """
    try:
        sample = await asyncio.wait_for(provider.get_current_location(), timeout=timeout_seconds)
        if sample is not None:
            return sample
        logger.info("Fresh location request returned nothing; using last known location")
    except asyncio.TimeoutError:
        logger.warning("No fresh location within %.1fs; using last known location", timeout_seconds)
    except Exception as exc:  # noqa: BLE001 - any provider failure degrades to cached location
        logger.warning("Fresh location request failed (%s); using last known location", exc)

    try:
        return await provider.get_last_known_location()
    except Exception as exc:  # noqa: BLE001
        logger.warning("Last known location unavailable: %s", exc)
        return None


# Singleton instance used across the app
location_feed = DeviceLocationFeed()
