# backend/namedex/pokemon_data.py

import httpx
import logging
from typing import List

from pydantic import ValidationError

from .evolutions import flatten_evolution_chain
from .exceptions import EvolutionLookupError, PokeAPIError
from .models import (
    EvolutionChainResource, FetchResult, FetchStatus, PokemonRecord,
    PokemonResource, SpeciesResource
)
from .pokeapi_client import fetch_pokeapi

logger = logging.getLogger(__name__)


async def _fetch_evolutions(client: httpx.AsyncClient, species_url: str) -> List[str]:
    """Follows species -> evolution chain and flattens it."""
    if not species_url:
        raise EvolutionLookupError("Pokémon payload has no species URL")

    species_data = await fetch_pokeapi(client, species_url)
    try:
        species = SpeciesResource.model_validate(species_data)
    except ValidationError as e:
        raise EvolutionLookupError(f"Unexpected species payload from {species_url}: {e}") from e

    chain_url = species.evolution_chain.url if species.evolution_chain else ""
    if not chain_url:
        raise EvolutionLookupError(f"Species {species_url} has no evolution chain URL")

    chain_data = await fetch_pokeapi(client, chain_url)
    try:
        evolution_chain = EvolutionChainResource.model_validate(chain_data)
    except ValidationError as e:
        raise EvolutionLookupError(f"Unexpected evolution chain payload from {chain_url}: {e}") from e

    return flatten_evolution_chain(evolution_chain.chain)

async def fetch_pokemon(client: httpx.AsyncClient, pokemon_id: int, base_url: str) -> FetchResult:
    """
    Fetches a Pokémon, its species and its evolution chain, in that order.

    Args:
        client: The httpx client of the current request.
        pokemon_id: National Pokédex ID.
        base_url: PokeAPI base URL (e.g. ``https://pokeapi.co/api/v2``).

    Returns:
        A FetchResult. Its status is PARTIAL, with empty evolutions, when the
        species or evolution-chain lookup failed.

    Raises:
        PokeAPIError: The Pokémon itself could not be fetched or decoded.
    """
    url = f"{base_url.rstrip('/')}/pokemon/{pokemon_id}"
    data = await fetch_pokeapi(client, url)
    try:
        pokemon = PokemonResource.model_validate(data)
    except ValidationError as e:
        logger.error(f"Unexpected Pokémon payload from {url}: {e}")
        raise PokeAPIError(f"Unexpected Pokémon payload from {url}: {e}", url=url) from e

    record = PokemonRecord.from_resource(pokemon)

    try:
        record.evolutions = await _fetch_evolutions(client, pokemon.species.url)
    except PokeAPIError as e:
        logger.warning(f"Evolutions unavailable for Pokémon {pokemon_id} ('{record.name}'): {e}")
        return FetchResult(record=record, status=FetchStatus.PARTIAL, evolution_error=str(e))

    return FetchResult(record=record)
