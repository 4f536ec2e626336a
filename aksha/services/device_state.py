"""Last battery reading reported by the device."""

from __future__ import annotations

from dataclasses import dataclass

from aksha.schemas.location import BatteryReading


@dataclass
class DeviceState:
    battery: BatteryReading | None = None

    def update_battery(self, reading: BatteryReading) -> None:
        self.battery = reading


# Singleton instance used across the app
device_state = DeviceState()
