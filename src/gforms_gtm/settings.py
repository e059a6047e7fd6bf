"""Overridable confirmation settings.

The confirmation adapter asks a settings provider for the redirect delay,
interstitial text and spinner color. :class:`FilteredSettings` starts from the
configured defaults and lets site code override each value through a filter,
the same way a theme would with ``add_filter``.
"""

from __future__ import annotations

from typing import Optional

from .config import PluginConfig
from .defaults import (
    FILTER_REDIRECT_DELAY,
    FILTER_REDIRECT_INTERSTITIAL,
    FILTER_REDIRECT_SPINNER_COLOR,
)
from .hooks import HookRegistry


class FilteredSettings:
    """Settings provider backed by :class:`PluginConfig` plus filters."""

    def __init__(
        self,
        config: Optional[PluginConfig] = None,
        hooks: Optional[HookRegistry] = None,
    ) -> None:
        self.config = config or PluginConfig()
        self.hooks = hooks or HookRegistry()

    def redirect_delay(self) -> int:
        value = self.hooks.apply_filters(FILTER_REDIRECT_DELAY, self.config.redirect_delay)
        try:
            return max(int(value), 0)
        except (TypeError, ValueError):
            return self.config.redirect_delay

    def interstitial_text(self) -> str:
        return str(
            self.hooks.apply_filters(
                FILTER_REDIRECT_INTERSTITIAL, self.config.redirect_interstitial
            )
        )

    def spinner_color(self) -> str:
        return str(
            self.hooks.apply_filters(
                FILTER_REDIRECT_SPINNER_COLOR, self.config.redirect_spinner_color
            )
        )


__all__ = ["FilteredSettings"]
