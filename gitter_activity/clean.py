"""
Null pruning for raw event payloads.

Gitter payloads routinely carry ``null`` for fields that do not apply
(no mentions, no edit timestamp, ...). Pruning them up front lets the
rest of the adapter treat "missing" and "null" the same way.
"""

from collections.abc import Mapping
from typing import Any

__all__ = ["clean_nulls"]


def clean_nulls(value: Any) -> Any:
    """Return a copy of ``value`` with ``None`` removed at every depth.

    Mappings lose keys whose value is ``None``; lists and tuples lose
    ``None`` items. Scalars come back unchanged. The input is never mutated.

    Args:
        value: Any JSON-like structure.

    Returns:
        The pruned copy (``None`` stays ``None``).
    """
    if value is None:
        return None
    if isinstance(value, Mapping):
        return {k: clean_nulls(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        cleaned = [clean_nulls(v) for v in value if v is not None]
        return cleaned if isinstance(value, list) else tuple(cleaned)
    return value
