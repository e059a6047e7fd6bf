"""Argument definitions: logging, config file and version flags."""

from __future__ import annotations

import argparse


def add_general_args(p: argparse.ArgumentParser) -> None:
    """Attach general arguments to the parser."""
    general = p.add_argument_group("General")
    general.add_argument(
        "-v", "--verbose", action="store_true", help="Enable INFO/DEBUG logging"
    )
    general.add_argument(
        "-ll",
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Explicit log level (overrides --verbose)",
    )
    general.add_argument("-f", "--log-file", help="Write logs to a file")
    general.add_argument(
        "-J", "--log-json", action="store_true", help="Also log JSON to stdout"
    )
    general.add_argument(
        "-c", "--config", help="JSON config file (registry URL, redirect settings)"
    )
    general.add_argument(
        "-V", "--version", action="store_true", help="Print version and exit"
    )
