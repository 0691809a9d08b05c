"""
Completion service wrapping the OpenAI chat completions API.
"""
from openai import AsyncOpenAI

from config import Config
from models.chat_models import ChatMessage
from utils.exceptions import GenerationError
from utils.http_client import build_openai_client
from utils.logger import app_logger


class CompletionService:
    """Single-shot chat completion with fixed model parameters."""

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = Config.OPENAI_MODEL,
        max_tokens: int = Config.MAX_TOKENS,
        temperature: float = Config.TEMPERATURE
    ):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature

    @classmethod
    def from_config(cls) -> "CompletionService":
        """Build a service backed by a pooled client using the configured credential."""
        return cls(build_openai_client())

    async def generate(self, messages: list[ChatMessage]) -> str:
        """
        Request one completion for the given messages.

        Args:
            messages: Ordered role-tagged messages, system message first

        Returns:
            Generated text with surrounding whitespace removed

        Raises:
            GenerationError: If the API returned no usable text
        """
        app_logger.debug(f"Requesting completion from {self.model} with {len(messages)} messages")

        completion = await self.client.chat.completions.create(
            model=self.model,
            messages=[message.to_dict() for message in messages],
            max_tokens=self.max_tokens,
            temperature=self.temperature
        )

        text = self._extract_text(completion)
        if not text:
            raise GenerationError()

        return text

    @staticmethod
    def _extract_text(completion) -> str:
        """Pull the first choice's content out of a completion, empty string if absent."""
        choices = getattr(completion, "choices", None)
        if not choices:
            return ""

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            return ""

        return content.strip()

    async def close(self) -> None:
        """Release the underlying HTTP connections."""
        await self.client.close()
