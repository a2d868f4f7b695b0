"""OpenAPI generation pipeline for Prisma data models."""

from .generator import (
    on_manifest,
    build_document,
    generate_outputs,
    write_openapi_files,
    options_for_schema,
    generate_openapi_schema,
)
from .options import GenerationOptions, DEFAULT_OPTIONS, resolve_options

__all__ = [
    "on_manifest",
    "build_document",
    "generate_outputs",
    "write_openapi_files",
    "options_for_schema",
    "generate_openapi_schema",
    "GenerationOptions",
    "DEFAULT_OPTIONS",
    "resolve_options",
]
