"""
Pydantic data models for API requests and responses.
"""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, StrictStr


class ChatRequest(BaseModel):
    """Chat request model. History is sanitized separately, so it is accepted as-is."""
    model_config = ConfigDict(extra="ignore")

    user_message: Optional[StrictStr] = None
    companion_name: Optional[StrictStr] = None
    history: Any = None


class ChatReply(BaseModel):
    """Generated reply payload."""
    response: str


class ChatReplyResponse(BaseModel):
    """Successful chat envelope."""
    success: bool = True
    data: ChatReply


class ErrorResponse(BaseModel):
    """Failure envelope."""
    success: bool = False
    error: str


class RouteNotFoundResponse(ErrorResponse):
    """Failure envelope for unknown routes."""
    path: str


class ApiInfoResponse(BaseModel):
    """Static payload served at the root path."""
    success: bool = True
    message: str = "Chatbot API is running"
    endpoint: str = "/chat"
    method: str = "POST"
