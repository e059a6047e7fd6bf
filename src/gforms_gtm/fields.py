"""Entry-to-analytics field extraction.

Builds the ``field_values`` object pushed with the submit event. Only fields
flagged ``allows_prepopulate`` in the form schema are read, so a form has to
opt a field in before its value reaches client-side analytics.

Dotted keys (``address.city``) are expanded into nested objects by
:func:`expand_nested_keys`, which builds new dicts instead of mutating
intermediate levels in place.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Sequence

from .defaults import CORE_META_KEYS, CUSTOM_META_PREFIX, NESTED_FIELD_TYPES
from .types import FormField
from .utils import is_empty


def extract_field_values(
    entry: Mapping[str, Any], fields: Sequence[FormField]
) -> Dict[str, Any]:
    """Return the nested ``field_values`` object for ``entry``.

    Merge order (later keys win): ``entry_id``, core payment/transaction
    meta, ``lvl:``-prefixed custom meta (prefix stripped), then prepopulate
    eligible fields keyed by input name.
    """
    data: Dict[str, Any] = {}
    if "id" in entry:
        data["entry_id"] = entry["id"]

    for key, value in entry.items():
        if key in CORE_META_KEYS and not is_empty(value):
            data[key] = value
        if isinstance(key, str) and key.startswith(CUSTOM_META_PREFIX):
            data[key[len(CUSTOM_META_PREFIX):]] = value

    for field in fields:
        if not field.allows_prepopulate:
            continue
        if field.inputs:
            _collect_inputs(data, field, entry)
            continue
        value = entry.get(field.id)
        if is_empty(value):
            continue
        if field.type == "multiselect":
            value = decode_multiselect(value)
        data[field.input_name] = value

    return expand_nested_keys(data)


def _collect_inputs(
    data: Dict[str, Any], field: FormField, entry: Mapping[str, Any]
) -> None:
    for item in field.inputs:
        value = entry.get(item.id)
        if is_empty(value):
            continue
        if field.type == "checkbox":
            selected = data.get(field.input_name)
            if not isinstance(selected, list):
                selected = []
            data[field.input_name] = selected + [value]
        elif field.type in NESTED_FIELD_TYPES:
            data[f"{field.type}.{item.name}"] = value
        else:
            data[item.name] = value


def decode_multiselect(value: Any) -> Any:
    """Decode a stored multiselect value into a list.

    Current entries store a JSON array; older ones a comma separated string.
    """
    if not isinstance(value, str):
        return value
    try:
        decoded = json.loads(value)
    except ValueError:
        return [part.strip() for part in value.split(",") if part.strip()]
    return decoded


def expand_nested_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Expand dotted keys into nested dicts.

    ``{"a.b": 1, "a.c": 2}`` becomes ``{"a": {"b": 1, "c": 2}}``. A non-dict
    value found on the path is replaced by a dict (last write wins). Keys
    without dots are copied as-is, so already nested input is unchanged.
    """
    output: Dict[str, Any] = {}
    for key, value in data.items():
        if not isinstance(key, str) or "." not in key:
            output[key] = value
            continue
        output = set_path(output, key.split("."), value)
    return output


def set_path(tree: Mapping[str, Any], path: List[str], value: Any) -> Dict[str, Any]:
    """Return a copy of ``tree`` with ``value`` stored at ``path``."""
    head, rest = path[0], path[1:]
    out = dict(tree)
    if not rest:
        out[head] = value
        return out
    child = out.get(head)
    out[head] = set_path(child if isinstance(child, dict) else {}, rest, value)
    return out


__all__ = [
    "extract_field_values",
    "decode_multiselect",
    "expand_nested_keys",
    "set_path",
]
