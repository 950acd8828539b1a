# backend/namedex/hashing.py

import hashlib

# First generation: Bulbasaur (1) to Mew (151)
DEFAULT_POKEMON_COUNT = 151


def pokemon_id(name: str, modulus: int = DEFAULT_POKEMON_COUNT) -> int:
    """
    Maps a name to a Pokémon ID in ``1..modulus``.

    The first 8 bytes of the SHA-1 digest of the UTF-8 encoded name are read
    as a big-endian unsigned integer. Changing the digest or the byte order
    would give every existing name a different Pokémon.
    """
    if modulus <= 0:
        raise ValueError(f"modulus must be positive, got {modulus}")
    digest = hashlib.sha1(name.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") % modulus + 1
