"""Typed accessors over parsed YAML/JSON documents.

Every accessor returns an empty value instead of raising when a level is
missing or has the wrong shape, so callers can chain lookups and pick the
fallback explicitly.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional, Sequence


def as_dict(value: Any) -> Dict[Any, Any]:
    return value if isinstance(value, dict) else {}


def as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


def lookup(tree: Any, *keys: Hashable | Sequence[Hashable]) -> Any:
    """Walk nested mappings, returning None as soon as a level is absent.

    A key may be a tuple of aliases; the first alias present wins. This covers
    YAML 1.1 loaders turning a bare ``on`` key into boolean ``True``.
    """
    node = tree
    for key in keys:
        mapping = as_dict(node)
        aliases = key if isinstance(key, tuple) else (key,)
        for alias in aliases:
            if alias in mapping:
                node = mapping[alias]
                break
        else:
            return None
    return node


__all__ = ["as_dict", "as_str", "as_str_list", "lookup"]
