"""Conversions between plain data and v0.8 ``ValueMap`` entries.

v0.8 ``dataModelUpdate`` messages carry typed entries rather than raw JSON:

    {"key": "/user/name", "valueString": "Ada"}
    {"key": "/user/age", "valueNumber": 36}
    {"key": "/tags", "valueMap": [{"key": "0", "valueString": "new"}]}

Lists become a ``valueMap`` keyed by index. ``None`` becomes an empty string.

`deep_merge` combines partial data models before they are converted or sent.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any


def value_to_value_map(key: str, value: Any) -> dict[str, Any]:
    """Convert one value to a ValueMap entry under ``key``.

    Example:
        >>> value_to_value_map("/count", 3)
        {'key': '/count', 'valueNumber': 3}
        >>> value_to_value_map("/tags", ["a"])
        {'key': '/tags', 'valueMap': [{'key': '0', 'valueString': 'a'}]}
    """
    if value is None:
        return {"key": key, "valueString": ""}
    if isinstance(value, str):
        return {"key": key, "valueString": value}
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return {"key": key, "valueBoolean": value}
    if isinstance(value, (int, float)):
        return {"key": key, "valueNumber": value}
    if isinstance(value, Mapping):
        return {
            "key": key,
            "valueMap": [value_to_value_map(str(k), v) for k, v in value.items()],
        }
    if isinstance(value, (list, tuple)):
        return {
            "key": key,
            "valueMap": [value_to_value_map(str(i), v) for i, v in enumerate(value)],
        }
    return {"key": key, "valueString": str(value)}


def object_to_value_map(data: Mapping[str, Any], prefix: str = "") -> list[dict[str, Any]]:
    """Convert each top-level key of ``data`` to an entry keyed ``prefix/key``.

    Nested objects stay nested inside ``valueMap``.
    """
    return [
        value_to_value_map(f"{prefix}/{key}", value) for key, value in data.items()
    ]


def flatten_object_to_value_map(
    data: Mapping[str, Any], base_path: str
) -> list[dict[str, Any]]:
    """Flatten nested objects into one entry per leaf path.

    Lists are leaves and keep their indexed ``valueMap`` form.

    Example:
        >>> flatten_object_to_value_map({"user": {"name": "Ada"}}, "/form")
        [{'key': '/form/user/name', 'valueString': 'Ada'}]
    """
    entries: list[dict[str, Any]] = []
    for key, value in data.items():
        full_path = f"{base_path}/{key}"
        if isinstance(value, Mapping):
            entries.extend(flatten_object_to_value_map(value, full_path))
        else:
            entries.append(value_to_value_map(full_path, value))
    return entries


def value_map_to_object(entries: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Convert ValueMap entries back to a plain dict.

    A leading ``/`` is stripped from keys. Nested ``valueMap`` entries become
    nested dicts (lists come back as dicts keyed "0", "1", ...). Entries
    without a value field are dropped.
    """
    result: dict[str, Any] = {}
    for entry in entries:
        key = str(entry.get("key", ""))
        key = key[1:] if key.startswith("/") else key
        if "valueString" in entry:
            result[key] = entry["valueString"]
        elif "valueNumber" in entry:
            result[key] = entry["valueNumber"]
        elif "valueBoolean" in entry:
            result[key] = entry["valueBoolean"]
        elif "valueMap" in entry:
            result[key] = value_map_to_object(entry["valueMap"])
    return result


def normalize_path(path: str, path_mappings: Mapping[str, str] | None = None) -> str:
    """Normalize a data path to slash form with a leading ``/``.

    Dots become slashes. ``path_mappings`` renames a leading segment, e.g.
    ``{"form": "booking"}`` maps ``/form/date`` to ``/booking/date``.

    Example:
        >>> normalize_path("user.name")
        '/user/name'
    """
    normalized = path.replace(".", "/")
    if not normalized.startswith("/"):
        normalized = f"/{normalized}"
    for source, target in (path_mappings or {}).items():
        pattern = re.compile(rf"^/{re.escape(source)}(/|$)")
        if pattern.match(normalized):
            normalized = pattern.sub(lambda m: f"/{target}{m.group(1)}", normalized, count=1)
    return normalized


def updates_to_value_map(
    updates: Iterable[Mapping[str, Any]],
    base_path: str = "",
    path_mappings: Mapping[str, str] | None = None,
) -> list[dict[str, Any]]:
    """Convert ``{"path", "value"}`` updates to ValueMap entries.

    Relative paths are joined to ``base_path``. Object values are flattened
    to one entry per leaf.

    Args:
        updates: Update items with ``path`` and ``value`` keys.
        base_path: Prefix for paths that do not start with ``/``.
        path_mappings: Leading-segment renames applied after normalizing.

    Returns:
        list[dict]: ValueMap entries in update order.
    """
    entries: list[dict[str, Any]] = []
    for update in updates:
        raw_path = str(update["path"])
        if not raw_path.startswith("/"):
            raw_path = f"{base_path}/{raw_path}"
        path = normalize_path(raw_path, path_mappings)
        value = update.get("value")
        if isinstance(value, Mapping):
            entries.extend(flatten_object_to_value_map(value, path))
        else:
            entries.append(value_to_value_map(path, value))
    return entries


def deep_merge(target: Mapping[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``source`` into a copy of ``target``.

    Nested mappings merge key by key. Any other source value replaces the
    target value, lists included. A ``None`` source value counts as unset and
    leaves the target value in place. Neither input is modified.

    Example:
        >>> deep_merge({"user": {"name": "Ada", "age": 36}}, {"user": {"age": 37}})
        {'user': {'name': 'Ada', 'age': 37}}
    """
    merged = dict(target)
    for key, value in source.items():
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = deep_merge(current, value)
        elif value is not None:
            merged[key] = value
    return merged


__all__ = [
    "value_to_value_map",
    "object_to_value_map",
    "flatten_object_to_value_map",
    "value_map_to_object",
    "normalize_path",
    "updates_to_value_map",
    "deep_merge",
]
