"""
Data models for chat processing.
Contains the normalized message type sent to the completion service.
"""
from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Roles understood by the completion service."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    """A single role-tagged message."""
    role: Role
    content: str

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role=Role.USER, content=content)

    def to_dict(self) -> dict:
        """Wire shape for the chat completions API."""
        return {"role": self.role.value, "content": self.content}
