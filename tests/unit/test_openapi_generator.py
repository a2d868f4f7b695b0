"""
Unit tests for assembling the OpenAPI document from descriptors.
"""

import pytest

from prisma_openapi.api.generators import build_openapi_spec
from prisma_openapi.api.options import resolve_options
from prisma_openapi.lib.datamodel import (
    EnumDescriptor,
    FieldDescriptor,
    FieldKind,
    ModelDescriptor,
)


USER = ModelDescriptor(
    name="User",
    fields=(
        FieldDescriptor(name="id", kind=FieldKind.SCALAR, type="Int"),
        FieldDescriptor(name="email", kind=FieldKind.SCALAR, type="String"),
        FieldDescriptor(name="name", kind=FieldKind.SCALAR, type="String", is_required=False),
        FieldDescriptor(name="role", kind=FieldKind.ENUM, type="Role"),
        FieldDescriptor(name="posts", kind=FieldKind.OBJECT, type="Post", is_list=True),
    ),
    documentation="A registered user",
)
POST = ModelDescriptor(
    name="Post",
    fields=(
        FieldDescriptor(name="id", kind=FieldKind.SCALAR, type="Int"),
        FieldDescriptor(name="author", kind=FieldKind.OBJECT, type="User"),
    ),
)
ROLE = EnumDescriptor(name="Role", values=("USER", "ADMIN"))


def build(models=(USER, POST), all_models=(USER, POST), enums=(ROLE,), **options):
    return build_openapi_spec(list(models), list(all_models), list(enums), resolve_options(options))


class TestDocumentLayout:

    def test_versions_and_info(self):
        spec = build(title="Blog API", description="Posts and users")

        assert spec["openapi"] == "3.1.0"
        assert spec["info"] == {
            "title": "Blog API",
            "description": "Posts and users",
            "version": "1.0.0",
        }
        assert spec["paths"] == {}

    def test_default_info(self):
        assert build()["info"]["title"] == "Prisma API"
        assert build()["info"]["description"] == ""

    def test_schema_order_models_then_enums(self):
        assert list(build()["components"]["schemas"]) == ["User", "Post", "Role"]

    def test_schema_count(self):
        schemas = build(models=[USER])["components"]["schemas"]

        assert len(schemas) == 1 + 1


class TestModelSchema:

    def test_user_schema(self):
        user = build()["components"]["schemas"]["User"]

        assert user["type"] == "object"
        assert user["properties"]["id"] == {"type": "integer", "format": "int32"}
        assert user["properties"]["role"] == {"$ref": "#/components/schemas/Role"}
        assert user["properties"]["posts"] == {
            "type": "array",
            "items": {"$ref": "#/components/schemas/Post"},
        }
        assert user["description"] == "A registered user"

    def test_property_order_matches_fields(self):
        user = build()["components"]["schemas"]["User"]

        assert list(user["properties"]) == USER.field_names

    def test_required_fields_in_order(self):
        user = build()["components"]["schemas"]["User"]

        assert user["required"] == ["id", "email", "role", "posts"]

    def test_no_description_without_documentation(self):
        assert "description" not in build()["components"]["schemas"]["Post"]

    def test_reference_to_filtered_out_model(self):
        # Post is not generated but still exists, so the reference is kept
        user = build(models=[USER])["components"]["schemas"]["User"]

        assert user["properties"]["posts"]["items"] == {"$ref": "#/components/schemas/Post"}

    def test_reference_to_missing_model(self):
        post = build(models=[POST], all_models=[POST])["components"]["schemas"]["Post"]

        assert post["properties"]["author"] == {
            "type": "object",
            "description": "Unknown related model",
        }

    def test_multi_line_model_description(self):
        model = ModelDescriptor(name="Note", documentation="Line one\\n   line two")
        note = build(models=[model], all_models=[model], enums=[])["components"]["schemas"]["Note"]

        assert note["description"] == "Line one\nline two"


class TestEnumSchema:

    def test_enum_schema(self):
        assert build()["components"]["schemas"]["Role"] == {
            "type": "string",
            "enum": ["USER", "ADMIN"],
        }

    def test_enums_never_filtered(self):
        assert "Role" in build(models=[])["components"]["schemas"]


class TestNameCollisions:

    def test_model_enum_collision_rejected(self):
        clash = EnumDescriptor(name="User", values=("A",))

        with pytest.raises(ValueError, match="'User'"):
            build(enums=[clash])
