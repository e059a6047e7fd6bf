"""Command-line entry point.

Runs one mode per invocation: ``--version``, ``--check-update``,
``--package-info``, ``--render-confirmation`` or ``--css-vars``. Exit code
is ``0`` on success, ``1`` when an update is available or no package
information could be fetched, and ``2`` for bad input. An unreachable
registry during ``--check-update`` is reported but exits ``0``.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from .args import parse_args
from .config import PluginConfig
from .errors import ConfigError
from .logging_utils import configure_logging, log_event
from .plugin import Plugin
from .types import Environment, SiteContext
from .ui import err
from .updater import PackageInfo, UpdateTransient
from .updater.report import report_package_info, report_update_status
from .utils import get_version


def _load_json(path: Optional[str], what: str) -> Any:
    if not path:
        raise SystemExit(f"--{what} is required with --render-confirmation")
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise SystemExit(f"Could not read {what} from {path}: {e}")


def _build_plugin(args: argparse.Namespace, config: PluginConfig) -> Plugin:
    site = SiteContext(
        http_host=args.host,
        blog_id=args.blog_id,
        home_url=args.home_url,
    )
    environment = Environment(
        php_version=args.php_version,
        wordpress_version=args.wordpress_version,
        mysql_version=args.mysql_version,
        home_url=args.home_url,
        server_software=args.server_software,
    )
    plugin = Plugin(
        Path(args.plugin_file),
        args.installed_version or get_version(),
        site,
        environment,
        config=config,
    )
    plugin.register()
    return plugin


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose, args.log_file, args.log_json, args.log_level)

    if args.version:
        print(get_version())
        return 0

    try:
        config = PluginConfig.load(
            Path(args.config) if args.config else None,
            overrides={
                "registry_url": args.registry_url,
                "package_type": args.package_type,
                "redirect_delay": args.redirect_delay,
                "redirect_interstitial": args.interstitial,
                "redirect_spinner_color": args.spinner_color,
            },
        )
    except ConfigError as e:
        err(str(e))
        return 2

    plugin = _build_plugin(args, config)
    log_event("cli_start", level=logging.DEBUG, slug=plugin.checker.slug)

    if args.check_update:
        plugin.hooks.do_action("admin_init")
        kind = plugin.checker.package_type
        transient = UpdateTransient(checked={plugin.checker.identifier: plugin.version})
        result = plugin.hooks.apply_filters(
            f"pre_set_site_transient_update_{kind}s", transient
        )
        return 1 if report_update_status(plugin.checker, result, verbose=args.verbose) else 0

    if args.package_info:
        plugin.hooks.do_action("admin_init")
        kind = plugin.checker.package_type
        info = plugin.hooks.apply_filters(
            f"{kind}s_api", False, f"{kind}_information", {"slug": plugin.checker.slug}
        )
        package = info if isinstance(info, PackageInfo) else None
        report_package_info(package)
        return 0 if package else 1

    if args.render_confirmation:
        confirmation = _load_json(args.confirmation, "confirmation")
        form = _load_json(args.form, "form")
        entry = _load_json(args.entry, "entry")
        if not isinstance(confirmation, (str, dict)):
            err("confirmation must be a JSON string or object")
            return 2
        if not isinstance(form, dict) or not isinstance(entry, dict):
            err("form and entry must be JSON objects")
            return 2
        plugin.hooks.do_action("init")
        print(plugin.hooks.apply_filters("gform_confirmation", confirmation, form, entry, True))
        return 0

    if args.css_vars:
        plugin.hooks.do_action("init")
        plugin.hooks.do_action("wp_head")
        print("\n".join(plugin.head))
        return 0

    err("Nothing to do; pass --check-update, --package-info, --render-confirmation or --css-vars.")
    return 2


__all__ = ["main"]
