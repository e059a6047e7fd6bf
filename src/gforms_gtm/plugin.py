"""Plugin wiring: registers the adapter and update checker on a hook registry.

:class:`Plugin` is constructed once by whatever embeds it and owns one
:class:`ConfirmationAdapter` and one :class:`UpdateChecker`. Nothing is
registered globally; :meth:`Plugin.register` attaches ``init`` and
``admin_init`` actions, and those in turn attach the front-end and admin
filters when the host fires them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Optional

from .config import PluginConfig
from .confirmation import Confirmation, ConfirmationAdapter
from .hooks import HookRegistry
from .markup import (
    StylesheetAsset,
    css_vars,
    force_ajax_submission_mode,
    modify_form_tag,
    stylesheet,
)
from .settings import FilteredSettings
from .types import Environment, SiteContext
from .updater import UpdateChecker


class Plugin:
    """Gravity Forms GTM adapter bound to one site."""

    def __init__(
        self,
        plugin_file: Path,
        version: str,
        site: SiteContext,
        environment: Environment,
        *,
        hooks: Optional[HookRegistry] = None,
        config: Optional[PluginConfig] = None,
        checker: Optional[UpdateChecker] = None,
    ) -> None:
        self.version = version
        self.site = site
        self.hooks = hooks or HookRegistry()
        self.config = config or PluginConfig()
        self.settings = FilteredSettings(self.config, self.hooks)
        self.adapter = ConfirmationAdapter(site, self.settings)
        self.checker = checker or UpdateChecker(
            plugin_file,
            version,
            environment,
            self.config.package_type,
            registry_url=self.config.registry_url,
        )
        # Output written by actions (wp_head) and queued assets
        self.head: List[str] = []
        self.styles: List[StylesheetAsset] = []

    def register(self) -> None:
        self.hooks.add_action("init", self.init)
        self.hooks.add_action("admin_init", self.admin_init)

    def init(self) -> None:
        hooks = self.hooks
        hooks.add_action("wp_head", self.add_css_vars, 1, 2)
        hooks.add_filter("gform_confirmation", self.confirmation_override, 20, 4)
        hooks.add_filter("gform_form_args", force_ajax_submission_mode, 10, 1)
        hooks.add_filter("gform_form_tag", self.modify_form_tag, 20, 2)
        hooks.add_action("wp_enqueue_scripts", self.load_stylesheet, 10, 2)

    def admin_init(self) -> None:
        kind = self.checker.package_type
        self.hooks.add_filter(
            f"pre_set_site_transient_update_{kind}s", self.checker.check_for_update
        )
        self.hooks.add_filter(f"{kind}s_api", self.checker.package_info, 20, 3)
        self.hooks.add_filter("upgrader_pre_install", self.checker.pre_install, 10, 2)

    def add_css_vars(self) -> None:
        self.head.append(css_vars(self.settings))

    def load_stylesheet(self) -> None:
        self.styles.append(stylesheet(self.site))

    def confirmation_override(
        self,
        confirmation: Confirmation,
        form: Mapping[str, Any],
        entry: Mapping[str, Any],
        is_ajax: bool = False,
    ) -> str:
        return self.adapter.render_confirmation(confirmation, form, entry, is_ajax)

    def modify_form_tag(self, form_tag: str, form: Mapping[str, Any]) -> str:
        return modify_form_tag(form_tag, form, self.site)

    def activate(self) -> None:
        self.checker.on_activate()

    def deactivate(self) -> None:
        self.checker.on_deactivate()


__all__ = ["Plugin"]
