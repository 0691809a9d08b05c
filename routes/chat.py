"""
Route handlers for chat operations.
Handles the /chat endpoint.
"""
import json
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from models.api_models import ChatReply, ChatReplyResponse, ErrorResponse
from services.chat_service import ChatService
from utils.constants import ErrorMessages
from utils.exceptions import ClientInputError, InvalidPayloadError
from utils.logger import app_logger

router = APIRouter()


def get_chat_service(request: Request) -> ChatService:
    """Chat service built at startup and owned by the app."""
    return request.app.state.chat_service


def _reject_constant(token: str):
    """NaN and Infinity are not JSON."""
    raise ValueError(f"Invalid JSON constant: {token}")


async def parse_request_body(request: Request) -> Any:
    """Decode the JSON body. An empty body decodes to an empty object.

    Raises:
        InvalidPayloadError: If the body is not valid UTF-8 JSON or nests too deeply to decode
    """
    raw_body = await request.body()
    if not raw_body:
        return {}

    try:
        return json.loads(raw_body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        app_logger.warning(f"Rejected malformed request body: {type(e).__name__}")
        raise InvalidPayloadError() from e


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    """Build a failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


@router.post("/chat", response_model=ChatReplyResponse)
@router.post("/chat/", response_model=ChatReplyResponse, include_in_schema=False)
async def chat(request: Request, chat_service: ChatService = Depends(get_chat_service)):
    """
    Generate one companion reply for a message and its caller-supplied history.
    """
    try:
        payload = await parse_request_body(request)
        chat_request = ChatService.validate_request(payload)
        reply = await chat_service.generate_reply(chat_request)

        return ChatReplyResponse(data=ChatReply(response=reply))

    except ClientInputError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        app_logger.error(f"Error generating response: {e}", exc_info=True)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorMessages.INTERNAL)
