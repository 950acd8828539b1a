# backend/namedex/clients.py
import httpx
import logging
from typing import AsyncIterator

from fastapi import Request

from .config import Settings

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> httpx.AsyncClient:
    """Builds the httpx client used for PokeAPI calls."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout_seconds),
        follow_redirects=True,
    )

async def get_pokeapi_client(request: Request) -> AsyncIterator[httpx.AsyncClient]:
    """
    FastAPI dependency: one client per request, closed once the response is
    produced. Requests never share connection state.
    """
    settings: Settings = request.app.state.settings
    async with create_client(settings) as client:
        logger.debug("Opened PokeAPI httpx client for request.")
        yield client
