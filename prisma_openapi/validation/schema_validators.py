"""
Schema-wide validation for Prisma models.

Runs after the whole textX model is built, once every block is known.
"""

from textx import get_children_of_type, get_location, TextXSemanticError


def _ensure_unique(objs, kind):
    seen = set()
    for o in objs:
        if o.name in seen:
            raise TextXSemanticError(
                f"{kind} with name '{o.name}' already exists.",
                **get_location(o),
            )
        seen.add(o.name)


def verify_unique_names(model):
    """Ensure block names are unique within their category."""
    _ensure_unique(get_children_of_type("Model", model), "Model")
    _ensure_unique(get_children_of_type("Enum", model), "Enum")
    _ensure_unique(get_children_of_type("CompositeType", model), "Type")
    _ensure_unique(
        [b for b in get_children_of_type("ConfigBlock", model) if b.kind == "generator"],
        "Generator",
    )
    _ensure_unique(
        [b for b in get_children_of_type("ConfigBlock", model) if b.kind == "datasource"],
        "Datasource",
    )


def verify_no_name_collisions(model):
    """
    Models, enums and composite types share one namespace: each of them
    becomes a key under `components.schemas`.
    """
    owners = {}
    for kind, rule in (("Model", "Model"), ("Enum", "Enum"), ("Type", "CompositeType")):
        for obj in get_children_of_type(rule, model):
            previous = owners.get(obj.name)
            if previous is not None and previous != kind:
                raise TextXSemanticError(
                    f"{kind} '{obj.name}' collides with {previous.lower()} of the same name.",
                    **get_location(obj),
                )
            owners[obj.name] = kind
