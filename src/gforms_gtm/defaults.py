"""Plugin constants and defaults (namespaces, registry, hook names)."""

from __future__ import annotations
from typing import Tuple

GLOBAL_NAMESPACE = "lvl"
PLUGIN_NAMESPACE = "gravityforms/gtm"

EVENT_NAME = "lvl.form_submit"
FORM_ID_PREFIX = "gravity-forms"
PROVIDER_PREFIX = "wordpress"
CUSTOM_META_PREFIX = "lvl:"

# Entry meta copied into field_values when non-empty
CORE_META_KEYS: Tuple[str, ...] = (
    "payment_status",
    "payment_amount",
    "payment_method",
    "transaction_id",
    "transaction_type",
    "currency",
)

# Composite field types whose inputs are keyed as "<type>.<input name>"
NESTED_FIELD_TYPES: Tuple[str, ...] = ("address", "name")

DEFAULT_REDIRECT_DELAY = 2000
DEFAULT_REDIRECT_INTERSTITIAL = "We are processing your submission. Please wait..."
DEFAULT_REDIRECT_SPINNER_COLOR = "#000"

FILTER_REDIRECT_DELAY = "lvl:gforms_gtm/redirect_delay"
FILTER_REDIRECT_INTERSTITIAL = "lvl:gforms_gtm/redirect_interstitial"
FILTER_REDIRECT_SPINNER_COLOR = "lvl:gforms_gtm/redirect_spinner_color"

REGISTRY_BASE_URL = "https://wordpress.level-cdn.com/api/packages"
USER_AGENT = "Lvl/WordPress/Updater"
VERSION_CHECK_TIMEOUT = 10.0
ANALYTICS_TIMEOUT = 5.0

PACKAGE_TYPES: Tuple[str, ...] = ("plugin", "theme")
VCS_MARKERS: Tuple[str, ...] = (".git",)


def namespace(append: str = "") -> str:
    """Return the plugin namespace, optionally suffixed with ``/<append>``."""
    base = f"{GLOBAL_NAMESPACE}:{PLUGIN_NAMESPACE}"
    return f"{base}/{append}" if append else base


__all__ = [
    "GLOBAL_NAMESPACE",
    "PLUGIN_NAMESPACE",
    "EVENT_NAME",
    "FORM_ID_PREFIX",
    "PROVIDER_PREFIX",
    "CUSTOM_META_PREFIX",
    "CORE_META_KEYS",
    "NESTED_FIELD_TYPES",
    "DEFAULT_REDIRECT_DELAY",
    "DEFAULT_REDIRECT_INTERSTITIAL",
    "DEFAULT_REDIRECT_SPINNER_COLOR",
    "FILTER_REDIRECT_DELAY",
    "FILTER_REDIRECT_INTERSTITIAL",
    "FILTER_REDIRECT_SPINNER_COLOR",
    "REGISTRY_BASE_URL",
    "USER_AGENT",
    "VERSION_CHECK_TIMEOUT",
    "ANALYTICS_TIMEOUT",
    "PACKAGE_TYPES",
    "VCS_MARKERS",
    "namespace",
]
