"""
Generation options for the OpenAPI generator.

Options arrive as a partial mapping, either from a schema's `generator` block
(camelCase keys, string values) or from library callers. `resolve_options`
shallow-overrides the defaults with whatever was supplied.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, List, Mapping, Optional, Union

from .gen_logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GenerationOptions:
    """Fully-populated generator configuration."""

    # Output directory for the generated files (used by the file writer only)
    output: str = "./openapi"

    # info.title / info.description of the document
    title: str = "Prisma API"
    description: str = ""

    # Comma-separated model allow-list and deny-list (deny wins)
    include_models: Optional[str] = None
    exclude_models: Optional[str] = None

    # Encodings to emit
    generate_yaml: bool = True
    generate_json: bool = False
    generate_jsdoc: bool = False


DEFAULT_OPTIONS = GenerationOptions()

# Configuration key -> attribute name
OPTION_ALIASES = {
    "output": "output",
    "title": "title",
    "description": "description",
    "includeModels": "include_models",
    "excludeModels": "exclude_models",
    "generateYaml": "generate_yaml",
    "generateJson": "generate_json",
    "generateJsDoc": "generate_jsdoc",
}

_FIELD_TYPES = {f.name: f.type for f in fields(GenerationOptions)}

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


def _coerce_bool(value: Any) -> Optional[bool]:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        return None
    return bool(value)


def _coerce(attr: str, value: Any) -> Any:
    if _FIELD_TYPES[attr] is bool:
        return _coerce_bool(value)
    # generator blocks may spell name lists as arrays: ["User", "Post"]
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def resolve_options(
    overrides: Union[Mapping[str, Any], GenerationOptions, None] = None,
    base: GenerationOptions = DEFAULT_OPTIONS,
) -> GenerationOptions:
    """
    Merge caller-supplied options over `base` (the defaults unless given).

    Keys may be configuration names (`generateJsDoc`) or attribute names
    (`generate_jsdoc`). `None` values count as unset; unknown keys are ignored.
    """
    if overrides is None:
        return base
    if isinstance(overrides, GenerationOptions):
        return overrides

    changes = {}
    for key, value in overrides.items():
        attr = OPTION_ALIASES.get(key, key)
        if attr not in _FIELD_TYPES:
            logger.debug(f"Ignoring unknown option '{key}'")
            continue
        if value is None:
            continue
        coerced = _coerce(attr, value)
        if coerced is None:
            logger.warning(f"Option '{key}' expects a boolean, got {value!r}; keeping {getattr(base, attr)!r}")
            continue
        changes[attr] = coerced

    return replace(base, **changes)


def parse_comma_separated_list(value: Optional[str]) -> Optional[List[str]]:
    """
    Split a comma-separated name list, trimming each name.

    Returns None when the list is unset or holds no names.
    """
    if not value:
        return None
    names = [item.strip() for item in value.split(",")]
    names = [name for name in names if name]
    return names or None
