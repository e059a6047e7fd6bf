"""Argument definitions: update checker and registry environment."""

from __future__ import annotations

import argparse
import platform


def add_updater_args(p: argparse.ArgumentParser) -> None:
    """Attach update-check modes and the environment reported to the registry."""
    modes = p.add_argument_group("Updates")
    modes.add_argument(
        "-U",
        "--check-update",
        action="store_true",
        help="Query the registry and report whether a newer release exists",
    )
    modes.add_argument(
        "-I",
        "--package-info",
        action="store_true",
        help="Print registry details for the package",
    )
    modes.add_argument(
        "-p",
        "--plugin-file",
        default="gravityforms-gtm/gravityforms-gtm.php",
        help="Main plugin file; its directory name is the package slug",
    )
    modes.add_argument(
        "-i", "--installed-version", help="Installed version (defaults to this build)"
    )
    modes.add_argument(
        "-t",
        "--package-type",
        choices=["plugin", "theme"],
        help="Package type registered with the host",
    )
    modes.add_argument("-r", "--registry-url", help="Registry base URL")

    env = p.add_argument_group("Environment")
    env.add_argument(
        "--php-version",
        default=platform.python_version(),
        help="Runtime version reported to the registry",
    )
    env.add_argument("--wordpress-version", default="", help="Host platform version")
    env.add_argument("--mysql-version", default="", help="Database server version")
    env.add_argument("--home-url", default="", help="Site home URL")
    env.add_argument("--server-software", default="?", help="Web server software")
