from __future__ import annotations

from typing import Optional

from ..ui import info, ok, warn
from .checker import UpdateChecker
from .types import PackageInfo, UpdateTransient


def _label_type(package_type: str) -> str:
    return {"plugin": "Plugin", "theme": "Theme"}.get(package_type, package_type.title())


def report_update_status(
    checker: UpdateChecker, result: UpdateTransient, *, verbose: bool = False
) -> bool:
    """Human-readable summary of one update check. Returns True when an update is offered."""
    label = _label_type(checker.package_type)
    if verbose:
        info(f"{label} {checker.slug}: installed {checker.version}")
        info(f"Registry: {checker.client.endpoint()}")
    offer = result.response.get(checker.identifier)
    if offer:
        warn(
            f"Update available: {checker.slug} {offer.get('new_version')} "
            f"(installed {checker.version})."
        )
        if offer.get("package"):
            info(f"Download: {offer['package']}")
        return True
    if checker.cached_metadata is None:
        warn(f"Could not reach the registry for {checker.slug}.")
        return False
    ok(f"{checker.slug} is up to date.")
    return False


def report_package_info(package: Optional[PackageInfo]) -> None:
    if package is None:
        warn("No package information available.")
        return
    info(f"{package.name} {package.version}")
    if package.author:
        info(f"Author: {package.author}")
    if package.last_updated:
        info(f"Released: {package.last_updated}")
    if package.download_link:
        info(f"Download: {package.download_link}")


__all__ = ["report_update_status", "report_package_info"]
