"""Jinja2 rendering for the Products UI pages."""

from __future__ import annotations

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(request: Request, view: str, data: dict, status_code: int = 200):
    """Render ``view`` (e.g. ``"pay/confirmation"``) with ``data``."""
    return templates.TemplateResponse(request, f"{view}.html", data, status_code=status_code)
