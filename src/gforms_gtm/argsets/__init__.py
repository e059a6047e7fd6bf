"""Aggregated CLI argument groups (argsets).

Small, focused helpers that attach related groups of arguments to an
``argparse.ArgumentParser`` and keep ``args.py`` minimal.

Public helpers:
  - add_general_args(parser)
  - add_updater_args(parser)
  - add_confirmation_args(parser)
"""

from __future__ import annotations

from .general import add_general_args
from .updater import add_updater_args
from .confirmation import add_confirmation_args

__all__ = ["add_general_args", "add_updater_args", "add_confirmation_args"]
