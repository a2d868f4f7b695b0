"""
Validation module for Prisma schemas.

Model-wide checks run as textX model processors, after every block is built.
Per-element checks live in processors/.
"""

from prisma_openapi.validation.schema_validators import (
    verify_unique_names,
    verify_no_name_collisions,
)

__all__ = [
    "verify_unique_names",
    "verify_no_name_collisions",
]
