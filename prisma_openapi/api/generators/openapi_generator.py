"""
OpenAPI document generation for Prisma data models.

Builds the `components.schemas` section of an OpenAPI 3.1 document from the
model and enum descriptors and renders it as YAML or JSON. No paths are
generated.
"""

import json
from typing import Any, Dict

import yaml

from ..extractors import map_to_openapi_type, normalize_description
from ..gen_logging import get_logger

logger = get_logger(__name__)

OPENAPI_VERSION = "3.1.0"
DOCUMENT_VERSION = "1.0.0"


def build_openapi_spec(models, all_models, enums, options) -> Dict[str, Any]:
    """
    Assemble the OpenAPI document.

    Args:
        models: Filtered ModelDescriptors that receive a schema
        all_models: Every ModelDescriptor in the schema, for relation lookups
        enums: EnumDescriptors; all of them receive a schema
        options: Resolved GenerationOptions

    Returns:
        The document as plain dicts and lists, schemas ordered models-then-enums.

    Raises:
        ValueError: if two schemas would be registered under the same name.
    """
    models_by_name = {m.name: m for m in all_models}

    spec = {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": options.title,
            "description": options.description,
            "version": DOCUMENT_VERSION,
        },
        "paths": {},
        "components": {
            "schemas": {},
        },
    }
    schemas = spec["components"]["schemas"]

    for model in models:
        _add_schema(schemas, model.name, _generate_model_schema(model, models_by_name))

    for enum in enums:
        _add_schema(schemas, enum.name, _generate_enum_schema(enum))

    return spec


def _add_schema(schemas, name, schema):
    if name in schemas:
        raise ValueError(f"Schema name '{name}' is used by more than one model or enum.")
    schemas[name] = schema


def _generate_model_schema(model, models_by_name) -> Dict[str, Any]:
    """Generate the object schema for a model."""
    schema = {
        "type": "object",
        "properties": {
            field.name: map_to_openapi_type(field, models_by_name)
            for field in model.fields
        },
        "required": model.required_field_names,
    }

    if model.documentation:
        schema["description"] = normalize_description(model.documentation)

    return schema


def _generate_enum_schema(enum) -> Dict[str, Any]:
    return {
        "type": "string",
        "enum": list(enum.values),
    }


# ------------------------------------------------------------------------------
# Encodings

class OpenApiDumper(yaml.SafeDumper):
    """
    Block-style YAML dumper:
      - sequences are indented under their parent key
      - multi-line strings use the literal block style
      - no anchors or aliases
    """

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)

    def ignore_aliases(self, data):
        return True


def _represent_str(dumper, data):
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


OpenApiDumper.add_representer(str, _represent_str)


def dump_yaml(data, indent: int = 2) -> str:
    return yaml.dump(
        data,
        Dumper=OpenApiDumper,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        indent=indent,
        width=float("inf"),
    )


def render_yaml(spec) -> str:
    """Serialize the document as YAML."""
    return dump_yaml(spec)


def render_json(spec) -> str:
    """Serialize the document as JSON, preserving key order."""
    return json.dumps(spec, indent=2, ensure_ascii=False) + "\n"
