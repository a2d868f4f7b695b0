"""
JSDoc generation: `@openapi` annotation comments for the component schemas.

The output is a JavaScript file made only of comment blocks, one per schema,
in the form swagger-jsdoc style tooling collects from source files.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .openapi_generator import dump_yaml

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"


def _schema_block(name, schema):
    """YAML lines for one schema, nested under components.schemas."""
    text = dump_yaml({"components": {"schemas": {name: schema}}})
    # a literal "*/" would close the comment early
    return [line.replace("*/", "*\\/") for line in text.splitlines()]


def render_jsdoc(spec, templates_dir: Path = TEMPLATES_DIR) -> str:
    """Render every component schema (models, then enums) as a JSDoc block."""
    schemas = spec["components"]["schemas"]
    blocks = [_schema_block(name, schema) for name, schema in schemas.items()]

    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(disabled_extensions=("jinja",)),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    template = env.get_template("openapi.js.jinja")
    return template.render(blocks=blocks)
