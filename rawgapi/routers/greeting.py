"""Static greeting screen served at GET /."""

from __future__ import annotations

from html import escape

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

_PAGE = """<!DOCTYPE html>
<html>
  <head><title>RAWG API Example</title></head>
  <body><p>Hello {name}!</p></body>
</html>
"""


def render_greeting(name: str) -> str:
    return _PAGE.format(name=escape(name))


def create_greeting_router(*, name: str) -> APIRouter:
    greeting_router = APIRouter(tags=["greeting"])
    page = render_greeting(name)

    @greeting_router.get("/", response_class=HTMLResponse)
    async def greeting() -> str:
        return page

    return greeting_router
