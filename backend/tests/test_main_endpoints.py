# backend/tests/test_main_endpoints.py

import pytest
import httpx
from httpx import ASGITransport, AsyncClient
import respx

from namedex.hashing import pokemon_id
from namedex import main as main_module
from namedex.main import create_app
from namedex.rendering import create_templates

from payloads import BASE_URL, CHAIN_URL, SPECIES_URL, chain_payload, pokemon_payload, species_payload


def mock_pokeapi(name, chain_response=None):
    """Mocks the three PokeAPI calls a request for ``name`` makes."""
    pid = pokemon_id(name, 151)
    respx.get(f"{BASE_URL}/pokemon/{pid}").mock(return_value=httpx.Response(200, json=pokemon_payload()))
    respx.get(SPECIES_URL).mock(return_value=httpx.Response(200, json=species_payload()))
    respx.get(CHAIN_URL).mock(return_value=chain_response or httpx.Response(200, json=chain_payload()))
    return pid


@pytest.mark.asyncio
@respx.mock
async def test_index_renders_pokemon(settings):
    """Test GET /?name=... end to end."""
    pid = mock_pokeapi("pikachu")

    async with AsyncClient(transport=ASGITransport(app=create_app(settings)), base_url="http://test") as client:
        response = await client.get("/", params={"name": "pikachu"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert pid == 53
    assert "#53" in html
    assert "you are Pikachu" in html
    assert "Electric" in html
    assert "<td>Speed</td><td>90</td>" in html
    assert "https://example.test/artwork/25.png" in html
    assert html.index("Pichu") < html.index("Raichu")
    assert "test-edition" in html

@pytest.mark.asyncio
@respx.mock
async def test_missing_name_defaults_to_cafard(settings):
    mock_pokeapi("cafard")

    async with AsyncClient(transport=ASGITransport(app=create_app(settings)), base_url="http://test") as client:
        default_response = await client.get("/")
        empty_response = await client.get("/?name=")
        cafard_response = await client.get("/", params={"name": "cafard"})

    assert default_response.status_code == 200
    assert default_response.text == cafard_response.text
    assert empty_response.text == cafard_response.text
    assert "#97" in default_response.text

@pytest.mark.asyncio
@respx.mock
async def test_evolution_failure_still_renders(settings):
    mock_pokeapi("pikachu", chain_response=httpx.Response(500))

    async with AsyncClient(transport=ASGITransport(app=create_app(settings)), base_url="http://test") as client:
        response = await client.get("/", params={"name": "pikachu"})

    assert response.status_code == 200
    assert "No known evolutions." in response.text
    assert "Raichu" not in response.text

@pytest.mark.asyncio
@respx.mock
async def test_detail_failure_returns_plain_text_500(settings):
    pid = pokemon_id("pikachu", 151)
    respx.get(f"{BASE_URL}/pokemon/{pid}").mock(return_value=httpx.Response(404))

    async with AsyncClient(transport=ASGITransport(app=create_app(settings)), base_url="http://test") as client:
        response = await client.get("/", params={"name": "pikachu"})

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert f"{BASE_URL}/pokemon/{pid} returned 404 Not Found" in response.text

@pytest.mark.asyncio
@respx.mock
async def test_detail_network_error_returns_500(settings):
    pid = pokemon_id("pikachu", 151)
    respx.get(f"{BASE_URL}/pokemon/{pid}").mock(side_effect=httpx.ConnectError("connection refused"))

    async with AsyncClient(transport=ASGITransport(app=create_app(settings)), base_url="http://test") as client:
        response = await client.get("/", params={"name": "pikachu"})

    assert response.status_code == 500
    assert "connection refused" in response.text

@pytest.mark.asyncio
@respx.mock
async def test_broken_template_returns_500(settings, tmp_path):
    mock_pokeapi("pikachu")
    (tmp_path / "index.html").write_text("{% for %}", encoding="utf-8")
    app = create_app(settings)
    app.state.templates = create_templates(str(tmp_path))

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/", params={"name": "pikachu"})

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text

@pytest.mark.asyncio
@respx.mock
async def test_template_render_error_returns_500(settings, tmp_path):
    mock_pokeapi("pikachu")
    (tmp_path / "index.html").write_text("{{ stats.hp.missing() }}", encoding="utf-8")
    app = create_app(settings)
    app.state.templates = create_templates(str(tmp_path))

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/", params={"name": "pikachu"})

    assert response.status_code == 500
    assert "missing" in response.text

@pytest.mark.asyncio
async def test_missing_template_returns_500(settings, tmp_path):
    app = create_app(settings)
    app.state.templates = create_templates(str(tmp_path))

    with respx.mock:
        mock_pokeapi("pikachu")
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/", params={"name": "pikachu"})

    assert response.status_code == 500
    assert "index.html" in response.text

@pytest.mark.asyncio
@respx.mock
async def test_malformed_species_url_still_renders(settings):
    pid = pokemon_id("pikachu", 151)
    respx.get(f"{BASE_URL}/pokemon/{pid}").mock(
        return_value=httpx.Response(200, json=pokemon_payload(species_url="http://a\x00b/"))
    )

    async with AsyncClient(transport=ASGITransport(app=create_app(settings)), base_url="http://test") as client:
        response = await client.get("/", params={"name": "pikachu"})

    assert response.status_code == 200
    assert "No known evolutions." in response.text

@pytest.mark.asyncio
@respx.mock
async def test_null_detail_fields_still_render(settings):
    pid = pokemon_id("pikachu", 151)
    payload = pokemon_payload()
    payload.update({"stats": None, "species": None})
    respx.get(f"{BASE_URL}/pokemon/{pid}").mock(return_value=httpx.Response(200, json=payload))

    async with AsyncClient(transport=ASGITransport(app=create_app(settings)), base_url="http://test") as client:
        response = await client.get("/", params={"name": "pikachu"})

    assert response.status_code == 200
    assert "you are Pikachu" in response.text
    assert "No known evolutions." in response.text

def test_run_serves_app_built_from_given_settings(settings, monkeypatch):
    calls = []
    monkeypatch.setattr(main_module.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    main_module.run(settings)

    assert len(calls) == 1
    served_app, kwargs = calls[0]
    assert served_app.state.settings is settings
    assert kwargs == {"host": "127.0.0.1", "port": 8080}

def test_import_does_not_build_an_app():
    assert not hasattr(main_module, "app")
