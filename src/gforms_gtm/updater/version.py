"""Release version ordering.

Registry versions follow semver precedence: the dotted numeric core decides
first, a pre-release tag (``1.2.0-beta.2``) sorts below its release, and
build metadata after ``+`` is ignored. Inputs may carry a leading ``v`` and
loose tags such as ``1.2.0beta``.
"""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Optional, Tuple, Union

Identifier = Union[int, str]
ParsedVersion = Tuple[Tuple[int, ...], Tuple[Identifier, ...]]

_CORE = re.compile(r"(\d+(?:\.\d+)*)(.*)$")


def parse_version(version: str) -> Optional[ParsedVersion]:
    """Split ``version`` into ``(core, prerelease)``; ``None`` if unparseable."""
    text = (version or "").strip().split("+", 1)[0]
    if text[:1] in ("v", "V"):
        text = text[1:]
    m = _CORE.match(text)
    if not m:
        return None
    core = tuple(int(n) for n in m.group(1).split("."))
    tag = m.group(2).lstrip("-._")
    prerelease = tuple(
        int(ident) if ident.isdigit() else ident.lower()
        for ident in re.split(r"[.\-]", tag)
        if ident
    )
    return core, prerelease


def compare_versions(left: ParsedVersion, right: ParsedVersion) -> int:
    """Return -1, 0 or 1 as ``left`` sorts before, with or after ``right``."""
    for a, b in zip_longest(left[0], right[0], fillvalue=0):
        if a != b:
            return -1 if a < b else 1
    return _compare_prerelease(left[1], right[1])


def _compare_prerelease(left: Tuple[Identifier, ...], right: Tuple[Identifier, ...]) -> int:
    if left == right:
        return 0
    # a release outranks any of its pre-releases
    if not left:
        return 1
    if not right:
        return -1
    for a, b in zip(left, right):
        if a == b:
            continue
        if isinstance(a, int) and isinstance(b, int):
            return -1 if a < b else 1
        if isinstance(a, int):
            return -1
        if isinstance(b, int):
            return 1
        return -1 if a < b else 1
    return -1 if len(left) < len(right) else 1


def is_version_newer(current: str, candidate: str) -> bool:
    """Return True if ``candidate`` strictly outranks ``current``.

    An unparseable candidate is never newer; an unparseable current version
    is older than any valid candidate.
    """
    cand = parse_version(candidate)
    if cand is None:
        return False
    cur = parse_version(current)
    if cur is None:
        return True
    return compare_versions(cur, cand) < 0


__all__ = ["is_version_newer", "parse_version", "compare_versions"]
