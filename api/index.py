"""
Hosting-platform entry point. The platform serves the ASGI `app` itself.
"""
from main import app

__all__ = ["app"]
