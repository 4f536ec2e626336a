"""Static helplines and safety tips."""

from fastapi import APIRouter, HTTPException, Query, status

from aksha.schemas.catalog import Helpline, SafetySituation
from aksha.services.catalog_service import get_situation, list_helplines, list_situations

router = APIRouter(tags=["catalog"])


@router.get("/helplines", response_model=list[Helpline])
def helplines(category: str | None = Query(default=None)):
    return list_helplines(category)


@router.get("/tips", response_model=list[SafetySituation])
def tips():
    return list_situations()


@router.get("/tips/{situation_id}", response_model=SafetySituation)
def tip(situation_id: int):
    situation = get_situation(situation_id)
    if situation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Safety tip not found")
    return situation
