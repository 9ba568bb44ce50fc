"""Primary key generation for persisted content rows (CUID2)."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new collision-resistant, URL-safe id for an entity or variant row."""
    return str(_next_cuid())
