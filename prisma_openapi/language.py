"""
Core metamodel and model builders for Prisma schemas.

This module provides the main entry points for parsing and validating Prisma
schema text. Validation logic is organized in the validation/ package, and
object processors are in the processors/ package.
"""

from os.path import join, dirname, abspath
from pathlib import Path
from textx import metamodel_from_file, get_children_of_type

from prisma_openapi.validation import verify_unique_names, verify_no_name_collisions
from prisma_openapi.processors import get_obj_processors


# ------------------------------------------------------------------------------
# Constants
THIS_DIR = dirname(abspath(__file__))
GRAMMAR_DIR = join(THIS_DIR, "grammar")

EMPTY_SCHEMA_MESSAGE = "Prisma schema must be a non-empty string."


# ------------------------------------------------------------------------------
# Public model builders

def build_model(model_path: str):
    """
    Parse & validate a model from a file path.

    A directory is read as a multi-file schema: every `*.prisma` file inside it
    (recursively, sorted by path) is concatenated before parsing.
    """
    return build_model_str(_read_schema(model_path))


def build_model_str(model_str: str):
    """Parse & validate a model from a string."""
    if not isinstance(model_str, str) or not model_str.strip():
        raise ValueError(EMPTY_SCHEMA_MESSAGE)
    return PrismaMetaModel.model_from_str(model_str)


# ------------------------------------------------------------------------------
# Model element getters

def get_model_models(model):
    return get_children_of_type("Model", model)


def get_model_enums(model):
    return get_children_of_type("Enum", model)


def get_model_types(model):
    return get_children_of_type("CompositeType", model)


def get_model_generators(model):
    return [b for b in get_children_of_type("ConfigBlock", model) if b.kind == "generator"]


# ------------------------------------------------------------------------------
# Model-wide validation (runs after all objects are constructed)

def model_processor(model, metamodel=None):
    """
    Main model processor - runs after parsing to perform cross-object validation.
    Order matters: unique names -> name collisions
    """
    verify_unique_names(model)
    verify_no_name_collisions(model)


# ------------------------------------------------------------------------------
# Schema files

def _read_schema(model_path: str) -> str:
    path = Path(model_path).resolve()

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if path.is_dir():
        files = sorted(path.rglob("*.prisma"))
        if not files:
            raise FileNotFoundError(f"No .prisma files found in: {path}")
        return "\n".join(f.read_text(encoding="utf-8") for f in files)

    return path.read_text(encoding="utf-8")


# ------------------------------------------------------------------------------
# Metamodel creation

def get_metamodel(debug: bool = False):
    """
    Load the textX metamodel from grammar/prisma.tx.
    Registers object processors and model processors.
    """
    mm = metamodel_from_file(
        join(GRAMMAR_DIR, "prisma.tx"),
        autokwd=True,
        auto_init_attributes=True,
        debug=debug,
    )

    # Object processors run during model construction
    mm.register_obj_processors(get_obj_processors())

    # Model processors run after the whole model is built
    mm.register_model_processor(model_processor)

    return mm


# Create the global metamodel instance
PrismaMetaModel = get_metamodel(debug=False)
