"""Error types shared across the plugin.

Remote failures never surface as exceptions: HTTP helpers return
``(data, error)`` tuples and callers fall back to "no update". The classes
here cover the few cases that do need to reach a caller.
"""

from __future__ import annotations

from dataclasses import dataclass


class GFormsGTMError(Exception):
    """Base class for errors raised by this package."""


class ConfigError(GFormsGTMError):
    """A configuration file could not be read or has an invalid shape."""


@dataclass(frozen=True)
class HostError:
    """Error value handed back to the host through a filter.

    Filters return values rather than raise, so blocking conditions (such as
    refusing to overwrite a git checkout) are reported as an instance of this
    class in place of the filtered value.
    """

    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


__all__ = ["GFormsGTMError", "ConfigError", "HostError"]
