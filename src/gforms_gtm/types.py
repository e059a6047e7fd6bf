"""Typed containers for form submissions and host context.

``FormField`` mirrors the subset of the form builder's field schema that the
confirmation adapter reads. ``SiteContext`` and ``Environment`` carry values
that a WordPress plugin would look up from globals (blog id, request host,
database version); here they are passed in explicitly by whoever embeds the
plugin.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional
from urllib.parse import urlparse


@dataclass(frozen=True)
class FieldInput:
    """One sub-input of a composite field (e.g. ``1.3`` / ``first``)."""

    id: str
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FieldInput":
        return cls(id=str(data.get("id", "")), name=str(data.get("name") or ""))


@dataclass(frozen=True)
class FormField:
    """A field definition from the form schema."""

    id: str
    type: str
    input_name: str = ""
    allows_prepopulate: bool = False
    inputs: List[FieldInput] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FormField":
        """Build a field from a host dict.

        Accepts both the host's camelCase keys (``inputName``,
        ``allowsPrepopulate``) and snake_case equivalents.
        """
        raw_inputs = data.get("inputs") or []
        inputs = [
            item if isinstance(item, FieldInput) else FieldInput.from_dict(item)
            for item in raw_inputs
        ]
        input_name = data.get("inputName", data.get("input_name")) or ""
        prepopulate = data.get("allowsPrepopulate", data.get("allows_prepopulate"))
        return cls(
            id=str(data.get("id", "")),
            type=str(data.get("type") or ""),
            input_name=str(input_name),
            allows_prepopulate=bool(prepopulate),
            inputs=inputs,
        )


def coerce_fields(raw: Optional[List[Any]]) -> List[FormField]:
    """Normalize a list of dicts and/or ``FormField`` objects."""
    return [
        item if isinstance(item, FormField) else FormField.from_dict(item)
        for item in (raw or [])
    ]


@dataclass(frozen=True)
class SiteContext:
    """Per-request site values used to build identifiers and asset URLs."""

    http_host: str
    blog_id: int = 1
    home_url: str = ""
    plugin_url: str = ""


@dataclass(frozen=True)
class Environment:
    """Versions and host details reported to the package registry."""

    php_version: str = ""
    wordpress_version: str = ""
    mysql_version: str = ""
    home_url: str = ""
    server_software: str = "?"

    @property
    def hostname(self) -> str:
        return urlparse(self.home_url).hostname or ""


__all__ = [
    "FieldInput",
    "FormField",
    "coerce_fields",
    "SiteContext",
    "Environment",
]
