"""Model extraction utilities."""

from .model_extractor import (
    get_models,
    get_enums,
    get_composite_type_names,
    get_generator_configs,
    extract_datamodel,
    extract_generator_config,
    filter_models,
)
from .type_mapper import map_to_openapi_type, normalize_description, schema_ref

__all__ = [
    "get_models",
    "get_enums",
    "get_composite_type_names",
    "get_generator_configs",
    "extract_datamodel",
    "extract_generator_config",
    "filter_models",
    "map_to_openapi_type",
    "normalize_description",
    "schema_ref",
]
