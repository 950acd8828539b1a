# backend/namedex/models.py
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Dict, List, Optional

# --- PokeAPI payloads ---
# Only the fields the page needs. Every field has a zero-value default so a
# sparse or reshaped upstream payload still validates.

class PokeAPIModel(BaseModel):
    """Base for upstream payloads: ``null`` means the same as absent."""

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

class NamedResource(PokeAPIModel):
    """A PokeAPI ``{"name": ..., "url": ...}`` reference."""
    name: str = ""
    url: str = ""

class PokemonTypeSlot(PokeAPIModel):
    type: NamedResource = Field(default_factory=NamedResource)

class PokemonStatData(PokeAPIModel):
    stat: NamedResource = Field(default_factory=NamedResource)
    base_stat: int = 0

class OfficialArtwork(PokeAPIModel):
    front_default: Optional[str] = None

class OtherSprites(PokeAPIModel):
    model_config = ConfigDict(populate_by_name=True)

    official_artwork: OfficialArtwork = Field(default_factory=OfficialArtwork, alias="official-artwork")

class SpriteData(PokeAPIModel):
    other: OtherSprites = Field(default_factory=OtherSprites)

class PokemonResource(PokeAPIModel):
    """``GET /pokemon/{id}``"""
    name: str = ""
    types: List[PokemonTypeSlot] = Field(default_factory=list)
    stats: List[PokemonStatData] = Field(default_factory=list)
    sprites: SpriteData = Field(default_factory=SpriteData)
    species: NamedResource = Field(default_factory=NamedResource)

class SpeciesResource(PokeAPIModel):
    """``GET /pokemon-species/{id}``"""
    evolution_chain: Optional[NamedResource] = None

class ChainLink(PokeAPIModel):
    """One node of an evolution chain: a species and what it evolves into."""
    species: NamedResource = Field(default_factory=NamedResource)
    evolves_to: List["ChainLink"] = Field(default_factory=list)

class EvolutionChainResource(PokeAPIModel):
    """``GET /evolution-chain/{id}``"""
    chain: ChainLink = Field(default_factory=ChainLink)


# --- Page data ---

class PokemonRecord(BaseModel):
    """Normalized Pokémon data for one request."""
    name: str = Field("", description="Pokémon name (lowercase, as PokeAPI spells it)")
    types: List[str] = Field(default_factory=list, description="Type names in slot order")
    stats: Dict[str, int] = Field(default_factory=dict, description="Base stat value by stat name")
    sprite: str = Field("", description="Official artwork URL")
    evolutions: List[str] = Field(default_factory=list, description="Flattened evolution chain")

    @classmethod
    def from_resource(cls, pokemon: PokemonResource) -> "PokemonRecord":
        return cls(
            name=pokemon.name,
            types=[t.type.name for t in pokemon.types],
            # Last value wins if PokeAPI ever repeats a stat
            stats={s.stat.name: s.base_stat for s in pokemon.stats},
            sprite=pokemon.sprites.other.official_artwork.front_default or "",
        )

class FetchStatus(str, Enum):
    COMPLETE = "complete"
    # Detail data is there but the species/evolution lookup failed
    PARTIAL = "partial"

class FetchResult(BaseModel):
    record: PokemonRecord
    status: FetchStatus = FetchStatus.COMPLETE
    evolution_error: Optional[str] = None

class PageParams(BaseModel):
    """Everything ``index.html`` renders."""
    name: str
    version: str
    pokemon_id: int
    pokemon_name: str
    types: List[str]
    stats: Dict[str, int]
    evolutions: List[str]
    pokemon_sprite: str

    @classmethod
    def build(cls, name: str, version: str, pokemon_id: int, record: PokemonRecord) -> "PageParams":
        return cls(
            name=name,
            version=version,
            pokemon_id=pokemon_id,
            pokemon_name=record.name,
            types=record.types,
            stats=record.stats,
            evolutions=record.evolutions,
            pokemon_sprite=record.sprite,
        )
