"""
Companion Chat Relay - FastAPI application relaying companion chats to OpenAI.
Injects a persona system prompt, forwards caller-supplied history, returns one reply as JSON.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Config
from cors import CORSHeadersMiddleware
from models.api_models import ApiInfoResponse, ErrorResponse, RouteNotFoundResponse
from routes import chat
from services.chat_service import ChatService
from services.completion_service import CompletionService
from utils.constants import CORS_HEADERS, CHAT_ALLOWED_METHODS, ErrorMessages
from utils.logger import app_logger

# Every standard method except OPTIONS, which the CORS middleware answers
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "CONNECT", "TRACE"]


def normalize_path(path: str) -> str:
    """Drop a trailing slash, except on the root path."""
    if len(path) > 1 and path.endswith("/"):
        return path[:-1]
    return path


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    app_logger.info(f"Chatbot server ready, chat endpoint at /chat (history limit {app.state.chat_service.history_limit})")
    yield
    await app.state.chat_service.close()


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Map router-level HTTP errors to the JSON envelope."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        path = normalize_path(request.url.path)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=RouteNotFoundResponse(error=ErrorMessages.ROUTE_NOT_FOUND, path=path).model_dump(),
        )

    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return JSONResponse(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            content=ErrorResponse(error=ErrorMessages.METHOD_NOT_ALLOWED).model_dump(),
            headers={"Allow": CHAT_ALLOWED_METHODS},
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=exc.headers,
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last line of defence: anything that escaped a route becomes a generic 500."""
    app_logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=ErrorMessages.INTERNAL).model_dump(),
        headers=CORS_HEADERS,
    )


async def root():
    """Root endpoint - API info."""
    return ApiInfoResponse()


def create_app(chat_service: ChatService | None = None) -> FastAPI:
    """
    Build the ASGI application.

    Args:
        chat_service: Service to handle chat requests. When omitted, configuration is
            validated and a service backed by the OpenAI API is built.

    Raises:
        ConfigurationError: If required configuration is missing
    """
    if chat_service is None:
        Config.validate()
        chat_service = ChatService(CompletionService.from_config(), Config.CHAT_HISTORY_LIMIT)

    app = FastAPI(title=Config.APP_TITLE, lifespan=lifespan, redirect_slashes=False)
    app.state.chat_service = chat_service

    app.add_middleware(CORSHeadersMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.add_api_route("/", root, methods=ALL_METHODS, response_model=ApiInfoResponse, tags=["info"])
    app.include_router(chat.router, tags=["chat"])

    return app


app = create_app()


def run() -> None:
    """Start the standalone listener, unless a hosting platform provides one."""
    if Config.VERCEL:
        app_logger.info("Hosted platform detected, not starting a standalone listener")
        return

    import uvicorn
    app_logger.info(f"Chatbot server running at http://localhost:{Config.PORT}/chat")
    uvicorn.run(app, host=Config.HOST, port=Config.PORT)


if __name__ == "__main__":
    run()
