"""Generators for the OpenAPI document and its encodings."""

from .openapi_generator import (
    OPENAPI_VERSION,
    DOCUMENT_VERSION,
    build_openapi_spec,
    render_yaml,
    render_json,
)
from .jsdoc_generator import render_jsdoc

__all__ = [
    "OPENAPI_VERSION",
    "DOCUMENT_VERSION",
    "build_openapi_spec",
    "render_yaml",
    "render_json",
    "render_jsdoc",
]
