"""
CORS middleware: permissive headers on every response, OPTIONS answered directly.
"""
from fastapi import Request, status
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from utils.constants import CORS_HEADERS


def apply_cors_headers(response: Response) -> Response:
    """Set the CORS headers on a response in place."""
    for key, value in CORS_HEADERS.items():
        response.headers[key] = value
    return response


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Adds CORS headers to every response and answers OPTIONS for any path
    with an empty 200, without reaching the routes.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process each request and attach CORS headers.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Empty 200 for OPTIONS, otherwise the handler's response with CORS headers
        """
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

        response = await call_next(request)
        return apply_cors_headers(response)
