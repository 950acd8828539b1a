# backend/namedex/main.py

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from contextlib import asynccontextmanager
from typing import Optional
import logging
import time

import httpx
import jinja2
import uvicorn

from . import __version__
from .clients import get_pokeapi_client
from .config import Settings, get_settings
from .exceptions import PokeAPIError
from .hashing import pokemon_id
from .models import FetchStatus, PageParams
from .pokemon_data import fetch_pokemon
from .rendering import create_templates, render_index

# Configure logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

router = APIRouter()


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings

@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    name: str = Query("", description="Any name; it decides which Pokémon you are."),
    settings: Settings = Depends(get_app_settings),
    client: httpx.AsyncClient = Depends(get_pokeapi_client),
):
    """Hashes the name to a Pokémon, fetches it from PokeAPI and renders the page."""
    start = time.perf_counter()
    name = name or settings.default_name

    pid = pokemon_id(name, settings.pokemon_count)
    result = await fetch_pokemon(client, pid, settings.pokeapi_base_url)
    if result.status is FetchStatus.PARTIAL:
        logger.info(f"Rendering '{name}' → {result.record.name} without evolutions")

    params = PageParams.build(name, settings.version, pid, result.record)
    response = render_index(request.app.state.templates, request, params)

    logger.info(f"✅ Generated page in {time.perf_counter() - start:.3f}s for {name} → {result.record.name}")
    return response

async def pokeapi_error_handler(request: Request, exc: PokeAPIError):
    logger.error(f"PokeAPI request failed for {request.url}: {exc}")
    return PlainTextResponse(str(exc), status_code=500)

async def template_error_handler(request: Request, exc: jinja2.TemplateError):
    logger.error(f"Template error for {request.url}: {exc}")
    return PlainTextResponse(str(exc), status_code=500)

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(f"Application startup ({settings.version}), PokeAPI at {settings.pokeapi_base_url}")
    yield
    logger.info("Application shutdown...")

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Builds the application around an explicit Settings object.

    Also usable as a uvicorn factory: ``uvicorn namedex.main:create_app --factory``.
    """
    settings = settings or get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())

    app = FastAPI(
        title="namedex",
        description="Tells you which Pokémon your name is.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.templates = create_templates()
    app.add_exception_handler(PokeAPIError, pokeapi_error_handler)
    app.add_exception_handler(jinja2.TemplateError, template_error_handler)
    app.include_router(router)
    return app

def run(settings: Optional[Settings] = None):
    """Process entry point: reads the environment once and serves forever."""
    settings = settings or get_settings()
    logger.info(f"🚀 Server running on http://{settings.addr}:{settings.port}")
    uvicorn.run(create_app(settings), host=settings.addr, port=settings.port)
