"""Checkout detection for the install-overwrite guard.

An update replaces the plugin directory wholesale. When that directory is a
developer's version-controlled checkout the update would clobber local work,
so :func:`has_vcs_checkout` lets the installer refuse.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..defaults import VCS_MARKERS


def has_vcs_checkout(root: Path, markers: Iterable[str] = VCS_MARKERS) -> bool:
    """Return True when ``root`` directly contains a VCS marker directory."""
    for marker in markers:
        try:
            if (root / marker).is_dir():
                return True
        except OSError:  # pragma: no cover
            continue
    return False


def slug_from_plugin_file(plugin_file: Path) -> str:
    """Return the package slug: the name of the plugin file's directory."""
    return Path(plugin_file).resolve().parent.name


__all__ = ["has_vcs_checkout", "slug_from_plugin_file"]
