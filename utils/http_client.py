"""
HTTP client utilities with connection pooling.
Builds the httpx transport and the OpenAI client that rides on it.
"""
import httpx
from openai import AsyncOpenAI
from config import Config


def build_http_client(timeout: float | None = None) -> httpx.AsyncClient:
    """
    Create an httpx client for completion calls.

    Features:
    - Connection pooling (reuses TCP connections to the API)
    - One timeout for connect/read/write

    Args:
        timeout: Timeout in seconds, defaults to Config.OPENAI_TIMEOUT

    Returns:
        Configured httpx.AsyncClient
    """
    limits = httpx.Limits(
        max_connections=100,
        max_keepalive_connections=20,
        keepalive_expiry=30.0
    )

    return httpx.AsyncClient(
        timeout=timeout if timeout is not None else Config.OPENAI_TIMEOUT,
        limits=limits
    )


def build_openai_client(api_key: str | None = None, http_client: httpx.AsyncClient | None = None) -> AsyncOpenAI:
    """
    Create the OpenAI client used for the lifetime of the process.

    Retries are disabled: a failed completion is reported to the caller, not repeated.

    Args:
        api_key: OpenAI credential, defaults to Config.OPENAI_API_KEY
        http_client: Transport to use, a pooled one is built if omitted

    Returns:
        AsyncOpenAI client
    """
    return AsyncOpenAI(
        api_key=api_key or Config.OPENAI_API_KEY,
        http_client=http_client or build_http_client(),
        max_retries=0
    )
