"""
Helpers for UUID primary keys

Ids arrive as client-supplied strings; anything that is not a UUID cannot
match a row, so it is filtered out before reaching PostgreSQL (where the
::uuid cast would raise instead of returning no rows).
"""
from typing import Iterable, List
from uuid import UUID


def is_uuid(value) -> bool:
    try:
        UUID(str(value))
    except (TypeError, ValueError):
        return False
    return True


def valid_uuids(values: Iterable) -> List[str]:
    """Keep only the values that parse as UUIDs, in order"""
    return [str(v) for v in values if is_uuid(v)]
