"""Operator configuration for the plugin.

This module defines :class:`PluginConfig`, a small dataclass holding the
operator-tunable values: registry base URL, package type and the three
confirmation settings (redirect delay, interstitial text, spinner color).

Sources, lowest to highest precedence:
 - dataclass defaults
 - a JSON object file (unknown keys ignored)
 - ``GFORMS_GTM_*`` environment variables
 - explicit overrides from the caller (e.g. CLI flags)

Unlike persisted CLI state, a config file the operator points at must be
valid: unreadable files or non-object JSON raise :class:`ConfigError`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .defaults import (
    DEFAULT_REDIRECT_DELAY,
    DEFAULT_REDIRECT_INTERSTITIAL,
    DEFAULT_REDIRECT_SPINNER_COLOR,
    PACKAGE_TYPES,
    REGISTRY_BASE_URL,
)
from .errors import ConfigError

ENV_PREFIX = "GFORMS_GTM_"


@dataclass(frozen=True)
class PluginConfig:
    """Operator-tunable plugin values."""

    registry_url: str = REGISTRY_BASE_URL
    package_type: str = "plugin"
    redirect_delay: int = DEFAULT_REDIRECT_DELAY
    redirect_interstitial: str = DEFAULT_REDIRECT_INTERSTITIAL
    redirect_spinner_color: str = DEFAULT_REDIRECT_SPINNER_COLOR

    def __post_init__(self) -> None:
        if self.package_type not in PACKAGE_TYPES:
            raise ConfigError(
                f"package_type must be one of {', '.join(PACKAGE_TYPES)}; "
                f"got {self.package_type!r}"
            )
        if self.redirect_delay < 0:
            raise ConfigError("redirect_delay must be >= 0")

    def with_overrides(self, overrides: Mapping[str, Any]) -> "PluginConfig":
        """Return a copy with non-``None`` known keys from ``overrides`` applied."""
        return replace(self, **_coerce(overrides))

    @classmethod
    def from_file(cls, path: Path) -> "PluginConfig":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigError(f"Could not load config {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Could not load config {path}: invalid format")
        return cls().with_overrides(data)

    @classmethod
    def load(
        cls,
        path: Optional[Path] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> "PluginConfig":
        """Resolve configuration from file, environment and ``overrides``."""
        config = cls.from_file(path) if path else cls()
        env = os.environ if environ is None else environ
        from_env = {
            f.name: env[ENV_PREFIX + f.name.upper()]
            for f in fields(cls)
            if ENV_PREFIX + f.name.upper() in env
        }
        config = config.with_overrides(from_env)
        return config.with_overrides(overrides or {})


def _coerce(data: Mapping[str, Any]) -> Dict[str, Any]:
    known = {f.name: f for f in fields(PluginConfig)}
    out: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known or value is None:
            continue
        if key == "redirect_delay":
            try:
                value = int(value)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"redirect_delay must be an integer: {value!r}") from e
        elif not isinstance(value, str):
            raise ConfigError(f"{key} must be a string")
        out[key] = value
    return out


__all__ = ["PluginConfig", "ENV_PREFIX"]
