"""
Tests for the prisma-openapi command line interface.
"""

import json

import yaml
from click.testing import CliRunner

from prisma_openapi.cli.cli import cli


def run(*args):
    return CliRunner().invoke(cli, list(args))


class TestValidate:

    def test_valid_schema(self, simple_schema_path):
        result = run("validate", str(simple_schema_path))

        assert result.exit_code == 0
        assert "success" in result.output

    def test_invalid_schema(self, write_prisma_file):
        path = write_prisma_file("model User { id Int @id")

        result = run("validate", str(path))

        assert result.exit_code == 1
        assert "failed" in result.output


class TestInspect:

    def test_lists_models_and_enums(self, simple_schema_path):
        result = run("inspect", str(simple_schema_path))

        assert result.exit_code == 0
        assert "model User" in result.output
        assert "enum Role: USER, ADMIN" in result.output


class TestGenerate:

    def test_default_yaml(self, simple_schema_path, temp_output_dir):
        result = run("generate", str(simple_schema_path), "--out", str(temp_output_dir), "-q")

        assert result.exit_code == 0
        spec = yaml.safe_load((temp_output_dir / "openapi.yaml").read_text())
        assert list(spec["components"]["schemas"]) == ["User", "Post", "Profile", "Role"]
        assert not (temp_output_dir / "openapi.json").exists()

    def test_flags(self, simple_schema_path, temp_output_dir):
        result = run(
            "generate", str(simple_schema_path),
            "--out", str(temp_output_dir),
            "--no-yaml", "--json", "--jsdoc",
            "--title", "Blog API",
            "--include-models", "User,Post",
            "--exclude-models", "Post",
            "-q",
        )

        assert result.exit_code == 0
        assert not (temp_output_dir / "openapi.yaml").exists()
        spec = json.loads((temp_output_dir / "openapi.json").read_text())
        assert spec["info"]["title"] == "Blog API"
        assert list(spec["components"]["schemas"]) == ["User", "Role"]
        assert "@openapi" in (temp_output_dir / "openapi.js").read_text()

    def test_generator_block_output(self, write_prisma_file, temp_output_dir):
        target = temp_output_dir / "docs"
        path = write_prisma_file(f"""
        generator openapi {{
          provider     = "prisma-openapi"
          output       = "{target.as_posix()}"
          generateJson = true
        }}

        model Item {{
          id Int @id
        }}
        """)

        result = run("generate", str(path), "-q")

        assert result.exit_code == 0
        assert (target / "openapi.yaml").exists()
        assert (target / "openapi.json").exists()

    def test_generator_block_output_relative_to_schema(self, write_prisma_file, temp_output_dir,
                                                        tmp_path, monkeypatch):
        path = write_prisma_file("""
        generator openapi {
          provider = "prisma-openapi"
          output   = "../generated"
        }

        model Item {
          id Int @id
        }
        """, "prisma/schema.prisma")
        monkeypatch.chdir(tmp_path)

        result = run("generate", str(path), "-q")

        assert result.exit_code == 0
        assert (temp_output_dir / "generated" / "openapi.yaml").exists()

    def test_out_relative_to_cwd(self, write_prisma_file, tmp_path, monkeypatch):
        path = write_prisma_file("""
        generator openapi {
          provider = "prisma-openapi"
          output   = "../generated"
        }

        model Item {
          id Int @id
        }
        """, "prisma/schema.prisma")
        monkeypatch.chdir(tmp_path)

        result = run("generate", str(path), "--out", "docs", "-q")

        assert result.exit_code == 0
        assert (tmp_path / "docs" / "openapi.yaml").exists()

    def test_empty_schema_fails(self, write_prisma_file, temp_output_dir):
        path = write_prisma_file("   \n")

        result = run("generate", str(path), "--out", str(temp_output_dir), "-q")

        assert result.exit_code == 1
        assert "non-empty" in result.output


class TestManifest:

    def test_manifest(self):
        result = run("manifest")

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "name": "prisma-openapi",
            "defaultOutput": "./openapi",
            "prettyName": "Prisma OpenAPI",
        }
