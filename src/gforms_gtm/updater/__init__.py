"""Self-hosted update channel split into small modules.

Each module holds a cohesive part of the update logic and these are
re-exported for easy import.
"""

from __future__ import annotations

from .types import PackageInfo, PackageMetadata, Release, UpdateTransient
from .version import is_version_newer
from .detect import has_vcs_checkout, slug_from_plugin_file
from .remote import RegistryClient, default_headers
from .checker import UpdateChecker, format_changelog

__all__ = [
    "PackageInfo",
    "PackageMetadata",
    "Release",
    "UpdateTransient",
    "is_version_newer",
    "has_vcs_checkout",
    "slug_from_plugin_file",
    "RegistryClient",
    "default_headers",
    "UpdateChecker",
    "format_changelog",
]
