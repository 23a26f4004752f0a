"""Pure rendering functions: structured data -> HTML strings.

All renderers follow the same pattern:
  - Input: snapshot / view model from schemas or presenter
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O, no Prefect decorators

Public API:
  - weather: build_modal_html, build_forecast_html, build_alerts_html,
    build_error_modal_html
  - city: build_city_html, build_city_message_html
  - device: build_device_status_html, build_device_error_html
  - diary: build_diary_html
  - page: build_page_html

Templates live in ``clothesline/templates/*.html.j2`` and produce fragments;
``base.html.j2`` is the only full page.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
