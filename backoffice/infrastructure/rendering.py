"""Jinja2 rendering for server-side pages and email bodies."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
LAYOUT_TEMPLATE = "layout.html"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_page(name: str, *, title: str, **context: Any) -> str:
    """Render ``pages/<name>.html`` and wrap it in the shared layout."""

    environment = get_environment()
    body = environment.get_template(f"pages/{name}.html").render(title=title, **context)
    return environment.get_template(LAYOUT_TEMPLATE).render(title=title, body=Markup(body))


def render_email(name: str, **context: Any) -> str:
    """Render ``email/<name>.html`` as a standalone HTML document."""

    return get_environment().get_template(f"email/{name}.html").render(**context)


__all__ = ["TEMPLATES_DIR", "render_email", "render_page"]
