# backend/namedex/evolutions.py

import logging
from typing import List

from .models import ChainLink

logger = logging.getLogger(__name__)

# Base species, first stage, second stage
MAX_EVOLUTION_DEPTH = 3


def flatten_evolution_chain(chain: ChainLink, max_depth: int = MAX_EVOLUTION_DEPTH) -> List[str]:
    """
    Flattens an evolution chain into species names, pre-order.

    Each evolution is followed by its own evolutions before its next sibling,
    so base -> {A, B}, A -> {A1} gives ``[base, A, A1, B]``. Branches are kept
    in PokeAPI order, nothing is sorted or deduplicated. Links deeper than
    ``max_depth`` are dropped.

    Returns an empty list when the root has no species name.
    """
    if not chain.species.name:
        return []

    names: List[str] = []

    def walk(link: ChainLink, depth: int) -> None:
        names.append(link.species.name)
        if depth >= max_depth:
            if link.evolves_to:
                logger.debug(f"Dropping {len(link.evolves_to)} evolution(s) of '{link.species.name}' past depth {max_depth}")
            return
        for next_link in link.evolves_to:
            walk(next_link, depth + 1)

    walk(chain, 1)
    return names
