"""Emergency contact schemas."""

from pydantic import BaseModel, Field


class Contact(BaseModel):
    """A device contact as synced by the device shell."""

    id: str = Field(min_length=1)
    display_name: str
    phone_numbers: list[str] = []

    model_config = {"frozen": True}


class ContactBookResponse(BaseModel):
    contacts: list[Contact]
    selected: list[Contact]
    max_selected: int
