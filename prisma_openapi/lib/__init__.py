from .datamodel import (
    SCALAR_TYPES,
    UNSUPPORTED_TYPE,
    FieldKind,
    FieldDescriptor,
    ModelDescriptor,
    EnumDescriptor,
    Datamodel,
)

__all__ = [
    "SCALAR_TYPES",
    "UNSUPPORTED_TYPE",
    "FieldKind",
    "FieldDescriptor",
    "ModelDescriptor",
    "EnumDescriptor",
    "Datamodel",
]
