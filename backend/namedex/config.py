# backend/namedex/config.py

import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
# Useful for local development
env_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env')
load_dotenv(dotenv_path=env_path)

class Settings(BaseSettings):
    """Process-wide settings, read once at startup."""

    # Listen address and port (ADDR / PORT)
    addr: str = "0.0.0.0"
    port: int = 8080

    # Display label shown in the page footer (VERSION)
    version: str = "cafard-edition"

    # PokeAPI base URL
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"

    # Names hash into 1..pokemon_count (first generation only)
    pokemon_count: int = 151

    # Used when the request has no ?name= or an empty one
    default_name: str = "cafard"

    # Outbound httpx timeout for each PokeAPI call
    request_timeout_seconds: float = 10.0

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        # Empty variables behave as unset so the defaults apply
        env_ignore_empty=True,
        env_file_encoding='utf-8',
    )


def get_settings() -> Settings:
    """Builds settings from the current environment."""
    return Settings()
