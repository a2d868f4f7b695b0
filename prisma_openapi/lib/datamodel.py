# lib/datamodel.py
"""
Immutable descriptors for a parsed Prisma data model.

The textX model produced by `prisma_openapi.language` is converted into these
values before any schema generation happens, so the generators never depend on
grammar classes. Cross references (field -> model, field -> enum) are kept as
plain names and resolved by lookup at build time.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


# Built-in Prisma scalar types. `Unsupported("...")` fields are scalar too and
# carry the type name below.
SCALAR_TYPES = frozenset({
    "String",
    "Boolean",
    "Int",
    "BigInt",
    "Float",
    "Decimal",
    "DateTime",
    "Json",
    "Bytes",
})

UNSUPPORTED_TYPE = "unsupported"


class FieldKind(str, Enum):
    """Classification of a field's type."""

    SCALAR = "scalar"
    ENUM = "enum"
    OBJECT = "object"


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    kind: FieldKind
    type: str
    is_list: bool = False
    is_required: bool = True
    documentation: Optional[str] = None


@dataclass(frozen=True)
class ModelDescriptor:
    name: str
    fields: Tuple[FieldDescriptor, ...] = ()
    documentation: Optional[str] = None

    @property
    def field_names(self):
        return [f.name for f in self.fields]

    @property
    def required_field_names(self):
        """Names of required fields, in declaration order."""
        return [f.name for f in self.fields if f.is_required]


@dataclass(frozen=True)
class EnumDescriptor:
    name: str
    values: Tuple[str, ...] = ()
    documentation: Optional[str] = None


@dataclass(frozen=True)
class Datamodel:
    """
    Everything schema generation needs from one Prisma schema.

    `generators` maps each `generator` block name to its key/value config,
    the way Prisma hands generator configuration to its plugins.
    """

    models: Tuple[ModelDescriptor, ...] = ()
    enums: Tuple[EnumDescriptor, ...] = ()
    generators: Dict[str, Dict[str, object]] = field(default_factory=dict)
