"""Gravity Forms GTM adapter.

Submit-event and redirect-interstitial confirmation overrides for Gravity
Forms, plus a self-hosted update checker for the plugin package.
"""

from .config import PluginConfig
from .confirmation import ConfirmationAdapter
from .hooks import HookRegistry
from .plugin import Plugin
from .types import Environment, FormField, SiteContext
from .updater import UpdateChecker, UpdateTransient

__all__ = [
    "ConfirmationAdapter",
    "Environment",
    "FormField",
    "HookRegistry",
    "Plugin",
    "PluginConfig",
    "SiteContext",
    "UpdateChecker",
    "UpdateTransient",
]
