from pathlib import Path
import json
import click
from click.core import ParameterSource

from datetime import date
from rich import pretty
from rich.console import Console
from rich.table import Table

from prisma_openapi.api.extractors import (
    extract_datamodel,
    extract_generator_config,
    get_composite_type_names,
)
from prisma_openapi.api.gen_logging import configure_gen_logging
from prisma_openapi.api.generator import on_manifest, options_for_schema, write_openapi_files
from prisma_openapi.language import build_model

pretty.install()
console = Console()


def _stamp() -> str:
    return f"[{date.today().strftime('%Y-%m-%d')}]"


def _flag(context, name, value):
    """None when the flag was not given on the command line."""
    if context.get_parameter_source(name) == ParameterSource.DEFAULT:
        return None
    return value


def _output_dir(schema_path, out_dir, options, datamodel):
    """A generator block `output` is relative to the schema, `--out` to the cwd."""
    if out_dir is None and extract_generator_config(datamodel).get("output"):
        schema_dir = Path(schema_path)
        if not schema_dir.is_dir():
            schema_dir = schema_dir.parent
        return (schema_dir / options.output).resolve()
    return Path(options.output).resolve()


@click.group()
@click.pass_context
def cli(context):
    context.ensure_object(dict)


@cli.command("validate", help="Parse and check a Prisma schema.")
@click.pass_context
@click.argument("schema_path")
def validate(context, schema_path):
    try:
        _ = build_model(schema_path)
        console.print(f"{_stamp()} Schema validation success!", style="green")
    except Exception as e:
        console.print(f"{_stamp()} Validation failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


@cli.command("inspect", help="Parse and print a summary of the schema (models, fields, enums).")
@click.pass_context
@click.argument("schema_path")
def inspect_cmd(context, schema_path):
    try:
        model = build_model(schema_path)
        datamodel = extract_datamodel(model)
        console.print(f"{_stamp()} Schema validation success!", style="green")

        for m in datamodel.models:
            table = Table(title=f"model {m.name}", title_justify="left")
            table.add_column("field")
            table.add_column("kind")
            table.add_column("type")
            table.add_column("required")
            for f in m.fields:
                type_text = f"{f.type}[]" if f.is_list else f.type
                table.add_row(f.name, f.kind.value, type_text, "yes" if f.is_required else "no")
            console.print(table)

        for e in datamodel.enums:
            console.print(f"enum {e.name}: {', '.join(e.values)}")

        for name in get_composite_type_names(model):
            console.print(f"type {name} (no schema generated)", style="yellow")
    except Exception as e:
        console.print(f"{_stamp()} Inspect failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


@cli.command("generate", help="Write OpenAPI schemas (YAML, JSON and/or JSDoc) for a Prisma schema.")
@click.pass_context
@click.argument("schema_path")
@click.option("--out", "out_dir", default=None, help="Output directory (default: generator block output, else ./openapi)")
@click.option("--title", default=None, help="API title (default: Prisma API)")
@click.option("--description", default=None, help="API description")
@click.option("--include-models", default=None, help="Comma-separated models to include")
@click.option("--exclude-models", default=None, help="Comma-separated models to exclude")
@click.option("--yaml/--no-yaml", "generate_yaml", default=True, help="Emit openapi.yaml (default: on)")
@click.option("--json/--no-json", "generate_json", default=False, help="Emit openapi.json (default: off)")
@click.option("--jsdoc/--no-jsdoc", "generate_jsdoc", default=False, help="Emit openapi.js (default: off)")
@click.option("--verbose", "-v", is_flag=True, help="Debug output")
@click.option("--quiet", "-q", is_flag=True, help="Warnings and errors only")
def generate(context, schema_path, out_dir, title, description, include_models, exclude_models,
             generate_yaml, generate_json, generate_jsdoc, verbose, quiet):
    configure_gen_logging(verbose=verbose, quiet=quiet)
    try:
        model = build_model(schema_path)
        datamodel = extract_datamodel(model)

        # Flags not given (None) leave the schema's generator block / defaults in place
        options = options_for_schema(datamodel, {
            "output": out_dir,
            "title": title,
            "description": description,
            "include_models": include_models,
            "exclude_models": exclude_models,
            "generate_yaml": _flag(context, "generate_yaml", generate_yaml),
            "generate_json": _flag(context, "generate_json", generate_json),
            "generate_jsdoc": _flag(context, "generate_jsdoc", generate_jsdoc),
        })

        out_path = _output_dir(schema_path, out_dir, options, datamodel)
        written = write_openapi_files(datamodel, options, out_path)

        for path in written:
            console.print(f"{_stamp()} Wrote {path}", style="green")
        if not written:
            console.print(f"{_stamp()} No output format enabled - nothing written.", style="yellow")

    except Exception as e:
        console.print(f"{_stamp()} Generate failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


@cli.command("manifest", help="Print the generator manifest as JSON.")
def manifest():
    click.echo(json.dumps(on_manifest(), indent=2))


def main():
    cli(prog_name="prisma-openapi")


if __name__ == "__main__":
    main()
