"""
Chat service containing core chat processing logic.
Handles request validation, history sanitization, prompt construction and reply generation.
"""
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from config import Config
from models.api_models import ChatRequest
from models.chat_models import ChatMessage, Role
from services.completion_service import CompletionService
from utils.constants import COMPANION_PROMPT_PARTS, AI_SENDER
from utils.exceptions import ChatValidationError
from utils.logger import app_logger


class ChatService:
    """Service for handling chat logic."""

    def __init__(self, completion_service: CompletionService, history_limit: int = Config.CHAT_HISTORY_LIMIT):
        self.completion_service = completion_service
        self.history_limit = history_limit

    @staticmethod
    def validate_request(payload: Any) -> ChatRequest:
        """
        Validate a decoded request body.

        Non-object payloads are treated as having no fields. Both user_message and
        companion_name must be non-empty strings.

        Raises:
            ChatValidationError: If a required field is missing, empty or not a string
        """
        if not isinstance(payload, Mapping):
            payload = {}

        try:
            request = ChatRequest.model_validate(payload)
        except ValidationError as e:
            app_logger.warning(f"Chat request failed schema validation: {e.error_count()} error(s)")
            raise ChatValidationError() from e

        if not request.user_message or not request.companion_name:
            raise ChatValidationError()

        return request

    @staticmethod
    def sanitize_history(history: Any, history_limit: int) -> list[ChatMessage]:
        """
        Normalize caller-supplied history into role-tagged messages.

        The last `history_limit` raw entries are kept first (a limit of 0 or less
        keeps everything), then entries without usable text content are dropped.
        Entries already normalized to ChatMessage keep their role.
        """
        if not isinstance(history, list):
            return []

        recent = history[-history_limit:] if history_limit > 0 else history

        sanitized = []
        for entry in recent:
            if isinstance(entry, ChatMessage):
                role, content = entry.role, entry.content
            elif isinstance(entry, Mapping):
                role = Role.ASSISTANT if entry.get("sender") == AI_SENDER else Role.USER
                content = entry.get("content")
            else:
                continue

            if not isinstance(content, str):
                continue
            content = content.strip()
            if not content:
                continue

            sanitized.append(ChatMessage(role=role, content=content))

        return sanitized

    @staticmethod
    def build_system_prompt(companion_name: str) -> str:
        """Build the persona system prompt for a companion."""
        return " ".join(
            part.format(companion_name=companion_name) for part in COMPANION_PROMPT_PARTS
        )

    @staticmethod
    def prepare_messages(request: ChatRequest, history_limit: int) -> list[ChatMessage]:
        """
        Prepare the messages list: system prompt, sanitized history, current user message.
        """
        return [
            ChatMessage.system(ChatService.build_system_prompt(request.companion_name)),
            *ChatService.sanitize_history(request.history, history_limit),
            ChatMessage.user(request.user_message),
        ]

    async def generate_reply(self, request: ChatRequest) -> str:
        """Run one validated request through the completion service."""
        app_logger.info(f"Chat request for {request.companion_name}: {request.user_message}")

        messages = self.prepare_messages(request, self.history_limit)
        reply = await self.completion_service.generate(messages)

        app_logger.info(f"Generated response: {reply}")
        return reply

    async def close(self) -> None:
        await self.completion_service.close()
