"""
Models package exports.
"""
from models.api_models import (
    ChatRequest,
    ChatReply,
    ChatReplyResponse,
    ErrorResponse,
    RouteNotFoundResponse,
    ApiInfoResponse,
)
from models.chat_models import ChatMessage, Role

__all__ = [
    'ChatRequest',
    'ChatReply',
    'ChatReplyResponse',
    'ErrorResponse',
    'RouteNotFoundResponse',
    'ApiInfoResponse',
    'ChatMessage',
    'Role'
]
