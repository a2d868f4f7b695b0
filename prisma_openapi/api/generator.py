"""
Main entry point for OpenAPI generation.

This module orchestrates the pipeline that turns a Prisma data model into an
OpenAPI document:

    options -> model filter -> schema builder -> encodings

Architecture:
    - options.py: GenerationOptions and option merging
    - extractors/: Data model extraction, model filtering and type mapping
    - generators/: Document assembly and YAML / JSON / JSDoc rendering
"""

from pathlib import Path
from typing import Dict, List

from prisma_openapi.language import build_model_str
from .extractors import extract_datamodel, extract_generator_config, filter_models
from .generators import build_openapi_spec, render_yaml, render_json, render_jsdoc
from .gen_logging import get_logger
from .options import GenerationOptions, resolve_options

logger = get_logger(__name__)

YAML_FILENAME = "openapi.yaml"
JSON_FILENAME = "openapi.json"
JSDOC_FILENAME = "openapi.js"


def on_manifest():
    """Generator metadata, as announced to a Prisma host."""
    logger.info("Prisma OpenAPI generator manifest")
    return {
        "name": "prisma-openapi",
        "defaultOutput": "./openapi",
        "prettyName": "Prisma OpenAPI",
    }


def build_document(datamodel, options: GenerationOptions):
    """Filter the models and assemble the OpenAPI document for them."""
    models = filter_models(datamodel.models, options.include_models, options.exclude_models)
    return build_openapi_spec(models, datamodel.models, datamodel.enums, options)


def generate_outputs(datamodel, options=None) -> Dict[str, str]:
    """
    Render every encoding requested by `options`.

    Returns:
        {filename: content} for openapi.yaml / openapi.json / openapi.js,
        in that order, holding only the enabled encodings.
    """
    options = resolve_options(options)
    spec = build_document(datamodel, options)

    outputs = {}
    if options.generate_yaml:
        outputs[YAML_FILENAME] = render_yaml(spec)
    if options.generate_json:
        outputs[JSON_FILENAME] = render_json(spec)
    if options.generate_jsdoc:
        outputs[JSDOC_FILENAME] = render_jsdoc(spec)
    return outputs


def write_openapi_files(datamodel, options=None, output_dir=None) -> List[Path]:
    """
    Generate the requested encodings and write them to disk.

    Args:
        datamodel: Parsed Datamodel
        options: GenerationOptions or a partial options mapping
        output_dir: Target directory; defaults to `options.output`

    Returns:
        Paths of the written files.
    """
    logger.info("Starting OpenAPI generation...")
    try:
        options = resolve_options(options)
        outputs = generate_outputs(datamodel, options)

        out_dir = Path(output_dir if output_dir is not None else options.output)
        if not out_dir.exists():
            out_dir.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Created output directory: {out_dir}")

        written = []
        for filename, content in outputs.items():
            path = out_dir / filename
            path.write_text(content, encoding="utf-8")
            logger.info(f"[GENERATED] {filename}: {path}")
            written.append(path)

        if not written:
            logger.warning("No output format enabled - nothing written")
        else:
            logger.info("OpenAPI generation completed successfully")
        return written
    except Exception as e:
        logger.error(f"OpenAPI generation failed: {e}")
        raise


def options_for_schema(datamodel, overrides=None) -> GenerationOptions:
    """Defaults < the schema's generator block < `overrides`."""
    if isinstance(overrides, GenerationOptions):
        return overrides
    from_schema = resolve_options(extract_generator_config(datamodel))
    return resolve_options(overrides, base=from_schema)


def generate_openapi_schema(prisma_schema: str, options=None) -> str:
    """
    Generate an OpenAPI document from Prisma schema text.

    Returns a single encoding: JSON when only JSON is enabled, YAML when YAML
    is enabled, JSON when neither is.

    Raises:
        ValueError: if `prisma_schema` is empty or whitespace-only.
    """
    model = build_model_str(prisma_schema)
    datamodel = extract_datamodel(model)
    resolved = options_for_schema(datamodel, options)
    spec = build_document(datamodel, resolved)

    if resolved.generate_json and not resolved.generate_yaml:
        return render_json(spec)
    if resolved.generate_yaml:
        return render_yaml(spec)
    return render_json(spec)
