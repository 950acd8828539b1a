# backend/tests/conftest.py

import pytest

from namedex.config import Settings

from payloads import BASE_URL


@pytest.fixture
def settings():
    return Settings(
        addr="127.0.0.1",
        port=8080,
        version="test-edition",
        pokeapi_base_url=BASE_URL,
        pokemon_count=151,
        default_name="cafard",
    )
