"""
Pytest configuration and shared fixtures for the prisma-openapi test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

from prisma_openapi.language import build_model, build_model_str
from prisma_openapi.api.extractors import extract_datamodel


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def fixtures_dir():
    """Return the directory holding the .prisma fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def simple_schema_path(fixtures_dir):
    return fixtures_dir / "simple.prisma"


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for generated output."""
    temp_dir = tempfile.mkdtemp(prefix="prisma_openapi_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def minimal_schema():
    """Return a minimal valid Prisma schema."""
    return """
datasource db {
  provider = "postgresql"
}

model User {
  id    Int     @id @default(autoincrement())
  email String  @unique
  name  String?
}
"""


@pytest.fixture
def write_prisma_file(temp_output_dir):
    """Factory fixture to write Prisma schema content to a temporary file."""
    def _write(content: str, filename: str = "schema.prisma") -> Path:
        file_path = temp_output_dir / filename
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)
        return file_path
    return _write


@pytest.fixture
def build_datamodel():
    """Factory fixture to parse schema text straight into a Datamodel."""
    def _build(content: str):
        return extract_datamodel(build_model_str(content))
    return _build


@pytest.fixture
def simple_datamodel(simple_schema_path):
    """Datamodel of tests/fixtures/simple.prisma."""
    return extract_datamodel(build_model(str(simple_schema_path)))
