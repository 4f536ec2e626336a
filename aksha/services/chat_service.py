"""AI chat relay with canned fallbacks."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from aksha.schemas.chat import ChatMessage, ChatReply, EmergencyHelpResponse
from aksha.services.api_client import ApiClient, ApiError
from aksha.services.fallback_responses import canned_chat_reply, emergency_guidance

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are Aksha AI Assistant, an AI helper integrated with the Aksha safety app. "
    "Provide practical information about personal safety, using the app features, "
    "and step-by-step guidance during emergencies. Be concise but thorough, and "
    "always prioritize user safety and well-being."
)


class ChatService:
    """Relays chat turns to the backend. Failures are never retried, only substituted."""

    def __init__(
        self,
        api: ApiClient,
        chat_path: str = "/ai/chat",
        emergency_path: str = "/ai/emergency",
        models_path: str = "/ai/models",
        default_model: str = "gemma3",
    ) -> None:
        self.api = api
        self.chat_path = chat_path
        self.emergency_path = emergency_path
        self.models_path = models_path
        self.default_model = default_model

    async def send_message(self, messages: list[ChatMessage], model: str | None = None) -> ChatReply:
        last_user = _latest_user_message(messages)
        if last_user is None:
            raise ValueError("No user message found")

        payload = {
            "messages": [
                m.model_dump(mode="json", exclude_none=True) for m in _with_system_prompt(messages)
            ],
            "model": model or self.default_model,
        }

        reply: str | None = None
        try:
            data = await self.api.post(self.chat_path, payload)
            reply = _response_text(data)
            if reply is None:
                logger.warning("Chat backend returned no response text; using canned reply")
        except ApiError as exc:
            logger.warning("Chat relay failed, using canned reply: %s", exc)

        fallback = reply is None
        if reply is None:
            reply = canned_chat_reply(last_user.content)

        assistant = ChatMessage(role="assistant", content=reply, timestamp=datetime.now(timezone.utc))
        return ChatReply(response=reply, messages=[*messages, assistant], fallback=fallback)

    async def get_emergency_help(self, situation: str, location: str | None = None) -> EmergencyHelpResponse:
        try:
            data = await self.api.post(self.emergency_path, {"situation": situation, "location": location})
            reply = _response_text(data)
            if reply is not None:
                return EmergencyHelpResponse(response=reply)
            logger.warning("Emergency backend returned no response text; using local guidance")
        except ApiError as exc:
            logger.warning("Emergency help request failed, using local guidance: %s", exc)
        return EmergencyHelpResponse(response=emergency_guidance(situation), fallback=True)

    async def get_models(self) -> list[str]:
        try:
            data = await self.api.get(self.models_path)
        except ApiError as exc:
            logger.warning("Error getting AI models: %s", exc)
            return []
        models = data.get("models") if isinstance(data, dict) else None
        if not isinstance(models, list):
            return []
        return [str(m) for m in models]


def _latest_user_message(messages: list[ChatMessage]) -> ChatMessage | None:
    for message in reversed(messages):
        if message.role == "user":
            return message
    return None


def _with_system_prompt(messages: list[ChatMessage]) -> list[ChatMessage]:
    if any(m.role == "system" for m in messages):
        return list(messages)
    return [ChatMessage(role="system", content=SYSTEM_PROMPT), *messages]


def _response_text(data: object) -> str | None:
    if not isinstance(data, dict):
        return None
    text = data.get("response")
    if not isinstance(text, str) or not text.strip():
        return None
    return text
