"""Argument parsing.

Option groups live in argsets/ to keep this file small.
"""

from __future__ import annotations
import argparse
from typing import List, Optional

from .argsets import add_confirmation_args, add_general_args, add_updater_args


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments (defaults to ``sys.argv[1:]``)."""
    p = argparse.ArgumentParser(
        prog="gforms-gtm",
        description="Gravity Forms GTM adapter tools",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    add_general_args(p)
    add_updater_args(p)
    add_confirmation_args(p)
    return p.parse_args(argv)


__all__ = ["parse_args"]
