"""SMS hand-off to the device shell."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from urllib.parse import quote

from aksha.core.alert_policies import SMS_NUMBER_SEPARATORS
from aksha.core.ws_manager import ConnectionManager
from aksha.schemas.alert import DispatchResult

logger = logging.getLogger(__name__)

SMS_COMPOSE_EVENT = "sms.compose"

_NUMBER_NOISE = re.compile(r"[\s\-().]")


class NoRecipientsError(ValueError):
    """Raised when an SOS has nobody to go to."""


def build_sms_uri(recipients: Sequence[str], body: str, separator: str = ";") -> str:
    """sms:<n1><sep><n2>?body=<url-encoded text>"""
    numbers = separator.join(_NUMBER_NOISE.sub("", n) for n in recipients)
    return f"sms:{numbers}?body={quote(body, safe='')}"


class SmsLinkDispatcher:
    """Sends the composed sms: URI to connected device shells to open.

    dispatched means a device received the hand-off, not that the SMS was
    sent: the user still confirms in the native messaging app.
    """

    def __init__(self, manager: ConnectionManager, separator: str = ";") -> None:
        if separator not in SMS_NUMBER_SEPARATORS:
            raise ValueError(f"Unsupported SMS number separator {separator!r}")
        self._manager = manager
        self.separator = separator

    async def send_text(self, recipients: Sequence[str], body: str) -> DispatchResult:
        if not recipients:
            raise NoRecipientsError("No recipients to send the alert to")

        uri = build_sms_uri(recipients, body, self.separator)
        delivered = await self._manager.broadcast(
            SMS_COMPOSE_EVENT,
            {"uri": uri, "recipients": list(recipients), "body": body},
        )
        if delivered:
            logger.info("SMS hand-off sent to %s device connection(s) for %s recipient(s)", delivered, len(recipients))
        else:
            logger.warning("No device connected; SMS hand-off for %s recipient(s) not delivered", len(recipients))
        return DispatchResult(dispatched=delivered > 0, uri=uri, delivered_to=delivered)
