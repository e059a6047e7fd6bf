"""Typed containers for registry metadata and host update structures.

``Release`` and ``PackageMetadata`` are parsed leniently from the registry's
JSON: missing or mistyped fields fall back to empty strings/lists rather than
failing the whole response. ``UpdateTransient`` models the host's update
list and ``PackageInfo`` the answer to a plugin/theme information query.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _str(data: Any, key: str) -> str:
    if not isinstance(data, dict):
        return ""
    value = data.get(key)
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class Release:
    """One published version of the package."""

    version: str = ""
    tag_name: str = ""
    download_url: str = ""
    html_url: str = ""
    published_at: str = ""
    author_login: str = ""
    author_url: str = ""
    notes_html: str = ""

    @classmethod
    def from_dict(cls, data: object) -> "Release":
        if not isinstance(data, dict):
            return cls()
        author = data.get("author")
        notes = data.get("notes")
        return cls(
            version=_str(data, "version"),
            tag_name=_str(data, "tag_name"),
            download_url=_str(data, "download_url"),
            html_url=_str(data, "html_url"),
            published_at=_str(data, "published_at"),
            author_login=_str(author, "login"),
            author_url=_str(author, "url"),
            notes_html=_str(notes, "html"),
        )


@dataclass(frozen=True)
class PackageMetadata:
    """Registry answer to a version check; ``releases`` is newest first."""

    name: str = ""
    releases: List[Release] = field(default_factory=list)

    @property
    def latest(self) -> Optional[Release]:
        return self.releases[0] if self.releases else None

    @classmethod
    def from_dict(cls, data: object) -> "PackageMetadata":
        if not isinstance(data, dict):
            return cls()
        raw_releases = data.get("releases")
        releases = (
            [Release.from_dict(r) for r in raw_releases]
            if isinstance(raw_releases, list)
            else []
        )
        return cls(name=_str(data.get("package"), "name"), releases=releases)


@dataclass
class UpdateTransient:
    """The host's update list.

    ``checked`` maps package identifiers to installed versions; ``response``
    maps identifiers to available update offers.
    """

    checked: Dict[str, str] = field(default_factory=dict)
    response: Dict[str, Dict[str, str]] = field(default_factory=dict)


@dataclass(frozen=True)
class PackageInfo:
    """Details shown in the host's "view details" dialog."""

    name: str
    slug: str
    version: str
    author: str
    author_profile: str
    homepage: str
    download_link: str
    trunk: str
    last_updated: str
    sections: Dict[str, str]


__all__ = ["Release", "PackageMetadata", "UpdateTransient", "PackageInfo"]
