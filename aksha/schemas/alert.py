"""SOS alert schemas."""

from pydantic import BaseModel

from aksha.schemas.location import LocationSample


class AlertMessage(BaseModel):
    """Outbound SOS text and the numbers it goes to. Built fresh per SOS."""

    body: str
    recipients: list[str]

    model_config = {"frozen": True}


class DispatchResult(BaseModel):
    """Outcome of handing an SMS to the device. Not a delivery receipt."""

    dispatched: bool
    uri: str
    delivered_to: int = 0


class SosResponse(BaseModel):
    dispatched: bool
    sms_uri: str
    body: str
    recipients: list[str]
    location: LocationSample | None
    backend_notified: bool


class BackendAck(BaseModel):
    success: bool = True
    message: str = ""
