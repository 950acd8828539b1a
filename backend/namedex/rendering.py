# backend/namedex/rendering.py

import os

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .models import PageParams

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")
INDEX_TEMPLATE = "index.html"


def capitalize_first(value: str) -> str:
    """Uppercases the first character only: 'mr-mime' -> 'Mr-mime'."""
    if not value:
        return ""
    return value[:1].upper() + value[1:]

def create_templates(directory: str = TEMPLATES_DIR) -> Jinja2Templates:
    templates = Jinja2Templates(directory=directory)
    templates.env.filters["capfirst"] = capitalize_first
    return templates

def render_index(templates: Jinja2Templates, request: Request, params: PageParams) -> HTMLResponse:
    """
    Renders the Pokémon page. Template lookup and rendering both happen here,
    so a missing, unparsable or failing template raises ``jinja2.TemplateError``.
    """
    return templates.TemplateResponse(request, INDEX_TEMPLATE, params.model_dump())
