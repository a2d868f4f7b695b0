"""
TextX object processors for Prisma schemas.

Object processors run during model construction to validate and normalise
individual model elements (doc comments, models, enums).
"""

from textx import get_location, TextXSemanticError


def _loc(obj):
    try:
        return get_location(obj)
    except Exception:
        return {}


# ------------------------------------------------------------------------------
# Documentation comments

def doc_line_processor(line):
    """Turn a raw `/// text` match into its documentation text."""
    return line.strip()[3:].strip()


def join_docs(docs):
    """Join the `///` lines preceding an element, or None when there are none."""
    if not docs:
        return None
    return "\n".join(docs)


def element_docs(element):
    """
    Documentation of a field or enum value: the `///` lines above it, then
    the `///` after it on the same line.
    """
    docs = list(element.docs or [])
    if getattr(element, "trailingDoc", None):
        docs.append(element.trailingDoc)
    return join_docs(docs)


# ------------------------------------------------------------------------------
# Models / composite types

def _fields_of(obj):
    return [m for m in getattr(obj, "members", []) or [] if m.__class__.__name__ == "Field"]


def model_obj_processor(model):
    """Field names must be unique within a model."""
    seen = set()
    for f in _fields_of(model):
        if f.name in seen:
            raise TextXSemanticError(
                f"Field '{f.name}' is already defined on model '{model.name}'.",
                **_loc(f),
            )
        seen.add(f.name)


def composite_type_obj_processor(composite):
    seen = set()
    for f in _fields_of(composite):
        if f.name in seen:
            raise TextXSemanticError(
                f"Field '{f.name}' is already defined on type '{composite.name}'.",
                **_loc(f),
            )
        seen.add(f.name)


# ------------------------------------------------------------------------------
# Enums

def enum_obj_processor(enum):
    """
    Enum validation:
      - must declare at least one value
      - value names must be unique
    """
    values = [m for m in getattr(enum, "members", []) or [] if m.__class__.__name__ == "EnumValue"]

    if not values:
        raise TextXSemanticError(
            f"Enum '{enum.name}' must declare at least one value.",
            **_loc(enum),
        )

    seen = set()
    for v in values:
        if v.name in seen:
            raise TextXSemanticError(
                f"Value '{v.name}' is already defined on enum '{enum.name}'.",
                **_loc(v),
            )
        seen.add(v.name)


def get_obj_processors():
    """Return object processor configuration for the metamodel."""
    return {
        "DocLine": doc_line_processor,
        "TrailingDoc": doc_line_processor,
        "Model": model_obj_processor,
        "CompositeType": composite_type_obj_processor,
        "Enum": enum_obj_processor,
    }
