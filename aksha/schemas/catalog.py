"""Safety catalogue schemas."""

from pydantic import BaseModel, computed_field


class Helpline(BaseModel):
    id: str
    name: str
    number: str
    description: str
    category: str

    @computed_field
    @property
    def tel_uri(self) -> str:
        return f"tel:{self.number}"


class SafetySituation(BaseModel):
    id: int
    title: str
    description: str
    tips: list[str]
