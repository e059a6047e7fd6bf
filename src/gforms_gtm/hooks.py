"""In-process hook registry (filters and actions).

The plugin never reaches for a global dispatcher; it is handed a
``HookRegistry`` and registers its callbacks there. A host adapter (or a test)
drives the registry with :meth:`HookRegistry.apply_filters` and
:meth:`HookRegistry.do_action`.

Callbacks run in ascending ``priority`` order, ties broken by registration
order, and receive at most ``accepted_args`` positional arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List


@dataclass(frozen=True)
class _Hook:
    callback: Callable[..., Any]
    priority: int
    accepted_args: int
    seq: int


class HookRegistry:
    """Minimal filter/action registry."""

    def __init__(self) -> None:
        self._hooks: Dict[str, List[_Hook]] = {}
        self._seq = 0

    def add_filter(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = 10,
        accepted_args: int = 1,
    ) -> None:
        self._seq += 1
        hooks = self._hooks.setdefault(name, [])
        hooks.append(_Hook(callback, priority, max(accepted_args, 0), self._seq))
        hooks.sort(key=lambda h: (h.priority, h.seq))

    # Actions share storage with filters; only the return value differs.
    add_action = add_filter

    def has(self, name: str) -> bool:
        return bool(self._hooks.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Pass ``value`` through every filter registered under ``name``."""
        for hook in list(self._hooks.get(name, [])):
            call_args = (value, *args)[: hook.accepted_args]
            value = hook.callback(*call_args)
        return value

    def do_action(self, name: str, *args: Any) -> None:
        """Invoke every action registered under ``name``; results are discarded."""
        for hook in list(self._hooks.get(name, [])):
            hook.callback(*args[: hook.accepted_args])


__all__ = ["HookRegistry"]
