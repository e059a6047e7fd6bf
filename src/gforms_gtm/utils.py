"""Utility helpers for gravityforms-gtm.

This module gathers small, dependency‑free helpers used across the package:
 - Version discovery for the installed/package build
 - Lightweight HTTP JSON requests with short timeouts
 - PHP-style emptiness checks for form entry values

Design goals:
 - No third‑party dependencies (stdlib only)
 - Fail safe: HTTP helpers return ``(data, error)`` and never raise
"""

from __future__ import annotations
import json
import urllib.error
import urllib.parse
import urllib.request
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

try:  # pragma: no cover
    from importlib.metadata import version as pkg_version
except Exception:  # pragma: no cover

    def pkg_version(_: str) -> str:  # type: ignore
        raise LookupError


def get_version() -> str:
    """Return the package version string.

    Lookup order (first match wins):
    1) ``importlib.metadata.version('gravityforms-gtm')`` (installed package)
    2) Parse ``pyproject.toml`` for ``project.version`` (source checkout)
    3) Fallback string ``"0.0.0+unknown"``
    """
    try:
        return pkg_version("gravityforms-gtm")
    except Exception:
        pass

    pyproj = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if pyproj.exists():
        try:
            import re

            text = pyproj.read_text(encoding="utf-8")
            m = re.search(r"(?ms)^\[project\].*?^version\s*=\s*\"([^\"]+)\"", text)
            if m:
                return m.group(1)
        except Exception:
            pass

    return "0.0.0+unknown"


def http_request_json(
    url: str,
    *,
    method: str = "GET",
    headers: Optional[Mapping[str, str]] = None,
    form: Optional[Mapping[str, Any]] = None,
    timeout: float = 3.0,
) -> Tuple[Optional[Any], Optional[str]]:
    """Send a request and decode a JSON response.

    Parameters
    - ``url``: Absolute URL to request.
    - ``method``: HTTP method (``GET`` or ``POST``).
    - ``headers``: Extra request headers.
    - ``form``: Optional mapping sent as an urlencoded body.
    - ``timeout``: Socket timeout in seconds.

    Returns
    - Tuple ``(data, error)``. On success ``error`` is ``None``; on transport
      failure, a non-200 status or an undecodable body, ``data`` is ``None``
      and ``error`` holds a short message (e.g., ``"HTTP 404: Not Found"``).
      An empty 200 body decodes to ``None`` with no error.
    """
    body = None
    if form is not None:
        body = urllib.parse.urlencode(form).encode("utf-8")
    req = urllib.request.Request(
        url, data=body, headers=dict(headers or {}), method=method
    )
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            status = getattr(resp, "status", 200)
            if status != 200:
                return None, f"HTTP {status}"
            raw = resp.read().decode("utf-8", errors="ignore")
    except urllib.error.HTTPError as e:
        return None, f"HTTP {e.code}: {e.reason}"
    except Exception as e:
        return None, str(e)
    if not raw.strip():
        return None, None
    try:
        return json.loads(raw), None
    except ValueError as e:
        return None, f"Invalid JSON: {e}"


def is_empty(value: Any) -> bool:
    """Return True for values PHP's ``empty()`` treats as empty.

    ``None``, ``False``, ``0``, ``0.0``, ``""``, ``"0"`` and empty
    containers are empty.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == "" or value == "0"
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (list, tuple, dict, set)):
        return not value
    return False


__all__ = ["get_version", "http_request_json", "is_empty", "pkg_version"]
