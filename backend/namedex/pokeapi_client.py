# backend/namedex/pokeapi_client.py

import httpx
import logging
from typing import Any

from .exceptions import PokeAPIConnectionError, PokeAPIError, ResourceNotFoundError

logger = logging.getLogger(__name__)


async def fetch_pokeapi(client: httpx.AsyncClient, url: str) -> Any:
    """
    Fetches one PokeAPI resource and returns its decoded JSON body.

    Args:
        client: The httpx client of the current request.
        url: Full resource URL.

    Raises:
        ResourceNotFoundError: PokeAPI answered 404.
        PokeAPIConnectionError: No response (timeout, DNS, refused, bad URL...).
        PokeAPIError: Any other non-2xx status or a body that is not JSON.
    """
    logger.debug(f"Fetching data from PokeAPI: {url}")
    try:
        response = await client.get(url)
        response.raise_for_status() # Raise an exception for 4xx or 5xx status codes
        logger.debug(f"Successfully fetched data from {url}, status: {response.status_code}")
        return response.json()
    except httpx.TimeoutException as e:
        logger.error(f"Request timed out for PokeAPI endpoint: {url}")
        raise PokeAPIConnectionError(f"Request timed out for {url}", url=url) from e
    except httpx.RequestError as e:
        logger.error(f"An error occurred while requesting {url!r}: {e}")
        raise PokeAPIConnectionError(f"Error requesting {url}: {e}", url=url) from e
    except httpx.InvalidURL as e:
        # Not a RequestError: raised while building the request
        logger.error(f"Invalid PokeAPI URL {url!r}: {e}")
        raise PokeAPIConnectionError(f"Invalid URL {url!r}: {e}", url=url) from e
    except httpx.HTTPStatusError as e:
        status_line = f"{e.response.status_code} {e.response.reason_phrase}"
        if e.response.status_code == 404:
            logger.warning(f"Resource not found at {url!r}")
            raise ResourceNotFoundError(f"{url} returned {status_line}", url=url) from e
        logger.error(f"HTTP error occurred: {status_line} for url {url!r}")
        raise PokeAPIError(f"{url} returned {status_line}", url=url) from e
    except ValueError as e:
        # response.json() on a non-JSON body
        logger.error(f"Invalid JSON received from {url!r}: {e}")
        raise PokeAPIError(f"Invalid JSON from {url}: {e}", url=url) from e
