"""Thin wrapper around Jinja2 for rendering link templates."""

from __future__ import annotations

import posixpath
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, unquote

from jinja2 import BaseLoader, ChainableUndefined, Environment, Template

# Characters left alone by JavaScript's encodeURI and encodeURIComponent.
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"
_URI_COMPONENT_SAFE = "-_.!~*'()"
# Like encodeURI, but "?" and "#" are escaped so they stay part of a path.
_PATH_SAFE = ";,/:@&=+$-_.!~*'()"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def encode_uri(value: Any) -> str:
    return quote(_text(value), safe=_URI_SAFE)


def encode_uri_component(value: Any) -> str:
    return quote(_text(value), safe=_URI_COMPONENT_SAFE)


def encode_path(value: Any) -> str:
    return quote(_text(value), safe=_PATH_SAFE)


def decode_uri_component(value: Any) -> str:
    return unquote(_text(value))


def filename(value: Any) -> str:
    return posixpath.basename(_text(value))


def _finalize(value: Any) -> Any:
    return "" if value is None else value


# Undefined names, chained attributes of undefined names and None all render
# as empty strings. The environment is never modified after this point.
_ENV = Environment(
    loader=BaseLoader(),
    undefined=ChainableUndefined,
    finalize=_finalize,
    autoescape=False,
)
_ENV.filters.update(
    {
        "encode_uri": encode_uri,
        "encode_uri_component": encode_uri_component,
        "encode_path": encode_path,
        "decode_uri_component": decode_uri_component,
        "filename": filename,
    }
)


def compile_template(source: str) -> Template:
    """Parse a template once so it can be rendered many times."""
    return _ENV.from_string(source)


def render(template: Template | str, context: Mapping[str, Any]) -> str:
    """Render a template with the given context."""
    if isinstance(template, str):
        template = compile_template(template)
    return template.render(**context)
