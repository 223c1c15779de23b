"""Immutable hash-map operations keyed by strings and keywords."""

from __future__ import annotations

from typing import Any

from lispkit.values import NIL, Keyword, LispError


def key_to_string(key: Any) -> str:
    """Return the storage key for a string or keyword."""
    if isinstance(key, str):
        return key
    if isinstance(key, Keyword):
        return ":" + key.name
    raise LispError(
        f"hash map keys must be strings or keywords, got {type(key).__name__}"
    )


def _require_map(name: str, mapping: Any) -> dict:
    if not isinstance(mapping, dict):
        raise LispError(
            f"{name} first argument must be a hash map, got {type(mapping).__name__}"
        )
    return mapping


def make_hash_map(*args: Any) -> dict:
    """Build a hash map from alternating keys and values."""
    if len(args) % 2 != 0:
        raise LispError(
            "hash-map requires an even number of arguments (key-value pairs), "
            f"got {len(args)}"
        )
    return {key_to_string(key): value for key, value in zip(args[::2], args[1::2])}


def hash_map_get(mapping: Any, key: Any) -> Any:
    """Return the value under ``key``, or nil when it is absent."""
    table = _require_map("hash-map-get", mapping)
    return table.get(key_to_string(key), NIL)


def hash_map_put(mapping: Any, key: Any, value: Any) -> dict:
    """Return a new hash map with ``key`` set to ``value``."""
    table = _require_map("hash-map-put", mapping)
    return {**table, key_to_string(key): value}


def hash_map_remove(mapping: Any, key: Any) -> dict:
    """Return a new hash map without ``key``."""
    table = _require_map("hash-map-remove", mapping)
    stored = key_to_string(key)
    return {k: v for k, v in table.items() if k != stored}


def hash_map_contains(mapping: Any, key: Any) -> bool:
    """Return whether the hash map holds ``key``."""
    table = _require_map("hash-map-contains?", mapping)
    return key_to_string(key) in table


def hash_map_keys(mapping: Any) -> list:
    """Return a list of the stored keys."""
    return list(_require_map("hash-map-keys", mapping))


def hash_map_values(mapping: Any) -> list:
    """Return a list of the stored values."""
    return list(_require_map("hash-map-values", mapping).values())


def hash_map_size(mapping: Any) -> int:
    """Return the number of key-value pairs."""
    return len(_require_map("hash-map-size", mapping))


def hash_map_empty(mapping: Any) -> bool:
    """Return whether the hash map has no pairs."""
    return not _require_map("hash-map-empty?", mapping)