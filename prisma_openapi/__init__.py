"""Generate OpenAPI component schemas from Prisma schemas."""

from prisma_openapi.api import (
    GenerationOptions,
    generate_openapi_schema,
    generate_outputs,
    write_openapi_files,
)

__version__ = "0.1.0"

__all__ = [
    "GenerationOptions",
    "generate_openapi_schema",
    "generate_outputs",
    "write_openapi_files",
]
