"""Argument definitions: confirmation rendering."""

from __future__ import annotations

import argparse


def add_confirmation_args(p: argparse.ArgumentParser) -> None:
    """Attach confirmation rendering mode and its inputs."""
    conf = p.add_argument_group("Confirmation")
    conf.add_argument(
        "-C",
        "--render-confirmation",
        action="store_true",
        help="Render confirmation markup from JSON inputs and print it",
    )
    conf.add_argument(
        "--confirmation",
        help="JSON file holding the confirmation (string or {\"redirect\": url})",
    )
    conf.add_argument("--form", help="JSON file holding the form (id, title, fields)")
    conf.add_argument("--entry", help="JSON file holding the submitted entry")
    conf.add_argument("--host", default="localhost", help="Request host name")
    conf.add_argument("--blog-id", type=int, default=1, help="Site/blog id")
    conf.add_argument(
        "--css-vars", action="store_true", help="Print the CSS variable block"
    )
    conf.add_argument("--redirect-delay", type=int, help="Redirect delay in ms")
    conf.add_argument("--interstitial", help="Interstitial message text")
    conf.add_argument("--spinner-color", help="Interstitial spinner color")
