"""Type mapping from Prisma field descriptors to OpenAPI schema fragments."""

import re

from prisma_openapi.lib.datamodel import FieldKind, UNSUPPORTED_TYPE
from ..gen_logging import get_logger

logger = get_logger(__name__)

SCHEMA_REF_PREFIX = "#/components/schemas/"

UNSUPPORTED_TYPE_DESCRIPTION = "Unsupported type"
UNKNOWN_TYPE_DESCRIPTION = "Unknown type"
UNKNOWN_RELATED_MODEL_DESCRIPTION = "Unknown related model"

# Prisma scalar -> (OpenAPI type, format)
OPENAPI_SCALAR_MAP = {
    "String": ("string", None),
    "Int": ("integer", "int32"),
    "BigInt": ("integer", "int64"),
    "Float": ("number", "double"),
    "Decimal": ("number", "double"),
    "Boolean": ("boolean", None),
    "DateTime": ("string", "date-time"),
    "Json": ("object", None),
}

_BREAK_INDENT = re.compile(r"\n\s+")


def schema_ref(name):
    """Reference object pointing at a component schema."""
    return {"$ref": f"{SCHEMA_REF_PREFIX}{name}"}


def normalize_description(documentation):
    """
    Turn `///` documentation into a description.

    Literal `\\n` sequences become line breaks, and whitespace following a
    break is dropped.
    """
    text = documentation.replace("\\n", "\n")
    return _BREAK_INDENT.sub("\n", text)


def _array_of(items):
    return {"type": "array", "items": items}


def _map_scalar(field, models_by_name):
    if field.type in OPENAPI_SCALAR_MAP:
        openapi_type, openapi_format = OPENAPI_SCALAR_MAP[field.type]
        schema = {"type": openapi_type}
        if openapi_format:
            schema["format"] = openapi_format
    elif field.type == UNSUPPORTED_TYPE:
        schema = {"type": "string", "description": UNSUPPORTED_TYPE_DESCRIPTION}
    else:
        logger.debug(f"Field '{field.name}' has unknown scalar type '{field.type}'")
        schema = {"type": "string", "description": UNKNOWN_TYPE_DESCRIPTION}

    return _array_of(schema) if field.is_list else schema


def _map_enum(field, models_by_name):
    # The enum's own schema is always emitted, so the reference is not checked.
    ref = schema_ref(field.type)
    return _array_of(ref) if field.is_list else ref


def _map_object(field, models_by_name):
    if field.type not in models_by_name:
        logger.debug(f"Field '{field.name}' references unknown model '{field.type}'")
        return {"type": "object", "description": UNKNOWN_RELATED_MODEL_DESCRIPTION}

    ref = schema_ref(field.type)
    return _array_of(ref) if field.is_list else ref


_KIND_MAPPERS = {
    FieldKind.SCALAR: _map_scalar,
    FieldKind.ENUM: _map_enum,
    FieldKind.OBJECT: _map_object,
}


def map_to_openapi_type(field, models_by_name):
    """
    Map a field descriptor to an OpenAPI schema fragment.

    Args:
        field: FieldDescriptor to map
        models_by_name: name -> ModelDescriptor for every model in the schema,
            used to check relation targets

    Returns:
        A new dict; bare `$ref` fragments never carry a description.
    """
    schema = _KIND_MAPPERS[field.kind](field, models_by_name)

    if field.documentation and "$ref" not in schema:
        schema["description"] = normalize_description(field.documentation)

    return schema
