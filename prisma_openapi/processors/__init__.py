"""
Processors module for Prisma schemas.

This module contains TextX object processors that run during model construction
to validate and transform individual model elements.
"""

from prisma_openapi.processors.object_processors import (
    get_obj_processors,
    doc_line_processor,
    join_docs,
    element_docs,
    model_obj_processor,
    composite_type_obj_processor,
    enum_obj_processor,
)

__all__ = [
    "get_obj_processors",
    "doc_line_processor",
    "join_docs",
    "element_docs",
    "model_obj_processor",
    "composite_type_obj_processor",
    "enum_obj_processor",
]
