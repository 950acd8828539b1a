# backend/namedex/exceptions.py

from typing import Optional


class PokeAPIError(Exception):
    """Base error for any failed PokeAPI call."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class ResourceNotFoundError(PokeAPIError):
    """PokeAPI answered 404 for the requested resource."""


class PokeAPIConnectionError(PokeAPIError):
    """The request never got a response (DNS, connect, timeout...)."""


class EvolutionLookupError(PokeAPIError):
    """The species or evolution-chain step could not produce a chain."""
