"""AI safety assistant chat API."""

from fastapi import APIRouter, Depends, HTTPException, status

from aksha.core.deps import get_chat_service
from aksha.schemas.chat import (
    ChatReply,
    ChatRequest,
    EmergencyHelpRequest,
    EmergencyHelpResponse,
    ModelsResponse,
)
from aksha.services.chat_service import ChatService

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatReply)
async def chat(data: ChatRequest, service: ChatService = Depends(get_chat_service)):
    """Relay one chat turn. Falls back to a canned reply when the backend is down."""
    try:
        return await service.send_message(data.messages, data.model)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/emergency", response_model=EmergencyHelpResponse)
async def emergency_help(data: EmergencyHelpRequest, service: ChatService = Depends(get_chat_service)):
    return await service.get_emergency_help(data.situation, data.location)


@router.get("/models", response_model=ModelsResponse)
async def models(service: ChatService = Depends(get_chat_service)):
    return ModelsResponse(models=await service.get_models())
