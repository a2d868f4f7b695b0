"""Extract models, enums and generator configuration from the textX model."""

import os

from prisma_openapi.language import (
    get_model_models,
    get_model_enums,
    get_model_types,
    get_model_generators,
)
from prisma_openapi.processors import element_docs, join_docs
from prisma_openapi.lib.datamodel import (
    SCALAR_TYPES,
    UNSUPPORTED_TYPE,
    Datamodel,
    EnumDescriptor,
    FieldDescriptor,
    FieldKind,
    ModelDescriptor,
)
from ..gen_logging import get_logger
from ..options import parse_comma_separated_list

logger = get_logger(__name__)

GENERATOR_PROVIDER = "prisma-openapi"


def _members_of(obj, class_name):
    return [m for m in getattr(obj, "members", []) or [] if m.__class__.__name__ == class_name]


def _field_kind(type_spec, enum_names):
    if type_spec.unsupported or type_spec.name in SCALAR_TYPES:
        return FieldKind.SCALAR
    if type_spec.name in enum_names:
        return FieldKind.ENUM
    # models, composite types and dangling names alike
    return FieldKind.OBJECT


def _field_descriptor(field, enum_names):
    type_spec = field.type
    return FieldDescriptor(
        name=field.name,
        kind=_field_kind(type_spec, enum_names),
        type=UNSUPPORTED_TYPE if type_spec.unsupported else type_spec.name,
        is_list=bool(type_spec.list),
        is_required=not type_spec.optional,
        documentation=element_docs(field),
    )


def get_models(model):
    """Convert every `model` block into a ModelDescriptor, in declaration order."""
    enum_names = {e.name for e in get_model_enums(model)}
    return [
        ModelDescriptor(
            name=m.name,
            fields=tuple(_field_descriptor(f, enum_names) for f in _members_of(m, "Field")),
            documentation=join_docs(m.docs),
        )
        for m in get_model_models(model)
    ]


def get_enums(model):
    """Convert every `enum` block into an EnumDescriptor, in declaration order."""
    return [
        EnumDescriptor(
            name=e.name,
            values=tuple(v.name for v in _members_of(e, "EnumValue")),
            documentation=join_docs(e.docs),
        )
        for e in get_model_enums(model)
    ]


def get_composite_type_names(model):
    return [t.name for t in get_model_types(model)]


# ------------------------------------------------------------------------------
# Generator configuration

def _config_value(value):
    """Plain Python value for a config property (`"x"`, `true`, `["a"]`, `env("X")`)."""
    class_name = value.__class__.__name__
    if class_name == "AttrArray":
        return [_config_value(item) for item in value.items]
    if class_name == "AttrCall":
        if value.name == "env" and value.args and value.args.args:
            return os.environ.get(str(_config_value(value.args.args[0].value)))
        return None
    return value


def get_generator_configs(model):
    """Map each `generator` block name to its key/value configuration."""
    return {
        block.name: {p.key: _config_value(p.value) for p in block.properties}
        for block in get_model_generators(model)
    }


def extract_datamodel(model) -> Datamodel:
    """Build the immutable Datamodel the generators work from."""
    models = get_models(model)
    enums = get_enums(model)

    logger.debug(f"Found {len(models)} models in Prisma schema")
    for m in models:
        logger.debug(f"Model: {m.name}")

    return Datamodel(
        models=tuple(models),
        enums=tuple(enums),
        generators=get_generator_configs(model),
    )


def extract_generator_config(datamodel: Datamodel):
    """
    Return the configuration of this generator's `generator` block.

    The block is the one whose provider is `prisma-openapi` (any provider
    string ending in it, e.g. a local path), falling back to a block named
    `openapi`. The `provider` key is dropped; `output` and the other keys map
    onto GenerationOptions.
    """
    for name, config in datamodel.generators.items():
        provider = str(config.get("provider") or "")
        if provider.endswith(GENERATOR_PROVIDER) or name == "openapi":
            return {k: v for k, v in config.items() if k != "provider"}
    return {}


# ------------------------------------------------------------------------------
# Model filtering

def filter_models(models, include_models=None, exclude_models=None):
    """
    Apply the include/exclude name lists to `models`, preserving input order.

    Include runs first, exclude second, so a name in both lists is excluded.
    Names matching no model are ignored.
    """
    filtered = list(models)

    include_list = parse_comma_separated_list(include_models)
    exclude_list = parse_comma_separated_list(exclude_models)

    if include_list:
        filtered = [m for m in filtered if m.name in include_list]

    if exclude_list:
        filtered = [m for m in filtered if m.name not in exclude_list]

    logger.debug(f"Generating schemas for {len(filtered)} of {len(models)} models")
    return filtered
