"""SOS message composition."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from aksha.core.alert_policies import EMERGENCY_PREAMBLE, LOCATION_UNAVAILABLE_TEXT, MAPS_URL_TEMPLATE
from aksha.schemas.alert import AlertMessage
from aksha.schemas.contact import Contact
from aksha.schemas.location import BatteryReading, LocationSample


def maps_link(location: LocationSample) -> str:
    """Google Maps link with coordinates at 6 decimal places."""
    return MAPS_URL_TEMPLATE.format(latitude=location.latitude, longitude=location.longitude)


def alert_recipients(contacts: Iterable[Contact]) -> list[str]:
    """First usable phone number of each contact; contacts without one are skipped."""
    recipients: list[str] = []
    for contact in contacts:
        for number in contact.phone_numbers:
            if number.strip():
                recipients.append(number.strip())
                break
    return recipients


def compose_alert(
    selected_contacts: Iterable[Contact],
    location: LocationSample | None,
    battery: BatteryReading | None,
) -> AlertMessage:
    """Build the SOS text and recipient list.

    Pure function. A missing location or battery reading degrades the text
    rather than failing; checking that there is at least one recipient is
    the caller's job.
    """
    lines = [EMERGENCY_PREAMBLE]

    if location is not None:
        lines.append(f"My location: {maps_link(location)}")
        if location.accuracy_meters is not None:
            lines.append(f"Accuracy: ±{round(location.accuracy_meters)} m")
        lines.append(f"Captured at: {_format_timestamp(location.captured_at)}")
    else:
        lines.append(LOCATION_UNAVAILABLE_TEXT)

    lines.append(_battery_line(battery))

    return AlertMessage(body="\n".join(lines), recipients=alert_recipients(selected_contacts))


def _format_timestamp(captured_at: datetime) -> str:
    if captured_at.tzinfo is None:
        captured_at = captured_at.replace(tzinfo=timezone.utc)
    return captured_at.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def _battery_line(battery: BatteryReading | None) -> str:
    if battery is None:
        return "Battery: unknown"
    state = "charging" if battery.is_charging else "not charging"
    return f"Battery: {battery.percent}% ({state})"
