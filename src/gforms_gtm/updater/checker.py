"""Self-hosted update checker.

:class:`UpdateChecker` answers the host's three update filters for a single
plugin or theme:
 - the update list (``check_for_update``)
 - the details dialog (``package_info``)
 - the installer guard (``pre_install``)

Registry metadata is fetched lazily and memoized for the lifetime of the
checker, so one request triggers at most one successful fetch. A failed
fetch is not memoized and simply reports "no update".
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ..defaults import PACKAGE_TYPES, REGISTRY_BASE_URL
from ..errors import HostError
from ..logging_utils import log_event
from ..types import Environment
from .detect import has_vcs_checkout, slug_from_plugin_file
from .remote import RegistryClient
from .types import PackageInfo, PackageMetadata, Release, UpdateTransient
from .version import is_version_newer


def format_changelog(releases: List[Release]) -> str:
    """Concatenate release notes, each under an ``<h3>`` of its tag."""
    return "".join(
        f"<h3>{release.tag_name}</h3>{release.notes_html}"
        for release in releases
        if release.notes_html
    )


class UpdateChecker:
    """Update checks for one installed package."""

    def __init__(
        self,
        plugin_file: Path,
        version: str,
        environment: Environment,
        package_type: str = "plugin",
        *,
        registry_url: str = REGISTRY_BASE_URL,
        client: Optional[RegistryClient] = None,
    ) -> None:
        if package_type not in PACKAGE_TYPES:
            raise ValueError(f"unknown package type: {package_type!r}")
        self.plugin_file = Path(plugin_file)
        self.install_dir = self.plugin_file.resolve().parent
        self.slug = slug_from_plugin_file(self.plugin_file)
        self.version = version
        self.package_type = package_type
        self.client = client or RegistryClient(self.slug, environment, registry_url)
        self._remote: Optional[PackageMetadata] = None

    @property
    def identifier(self) -> str:
        """Key of this package in the host's update list."""
        if self.package_type == "plugin":
            return f"{self.slug}/{self.slug}.php"
        return self.slug

    @property
    def cached_metadata(self) -> Optional[PackageMetadata]:
        """Metadata from an earlier successful fetch, without fetching."""
        return self._remote

    def fetch_remote_metadata(self) -> Optional[PackageMetadata]:
        if self._remote is None:
            self._remote = self.client.fetch_metadata()
        return self._remote

    def check_for_update(self, transient: UpdateTransient) -> UpdateTransient:
        """Add an update offer to ``transient`` when the registry has a newer release.

        The input is returned as-is whenever no offer is made.
        """
        if not transient.checked or self.identifier not in transient.checked:
            return transient

        remote = self.fetch_remote_metadata()
        if remote is None:
            return transient
        release = remote.latest
        if release is None or not release.version:
            return transient
        if not is_version_newer(self.version, release.version):
            log_event(
                "update_not_available",
                level=logging.DEBUG,
                slug=self.slug,
                version=release.version,
            )
            return transient

        offer: Dict[str, str]
        if self.package_type == "plugin":
            offer = {"slug": self.slug, "plugin": self.identifier}
        else:
            offer = {"theme": self.slug}
        offer.update(
            new_version=release.version,
            package=release.download_url,
            url=release.html_url,
        )
        log_event(
            "update_available",
            slug=self.slug,
            version=release.version,
            url=release.download_url,
        )
        return replace(transient, response={**transient.response, self.identifier: offer})

    def package_info(self, result: Any, action: str, args: Any) -> Any:
        """Answer an information query for this package, else pass ``result`` on."""
        if action != f"{self.package_type}_information":
            return result
        slug = args.get("slug") if isinstance(args, Mapping) else getattr(args, "slug", None)
        if slug != self.slug:
            return result

        remote = self.fetch_remote_metadata()
        if remote is None:
            return result

        release = remote.latest or Release()
        return PackageInfo(
            name=remote.name or self.slug,
            slug=self.slug,
            version=release.version or self.version,
            author=release.author_login,
            author_profile=release.author_url,
            homepage=release.html_url,
            download_link=release.download_url,
            trunk=release.download_url,
            last_updated=release.published_at,
            sections={
                "description": remote.name,
                "changelog": format_changelog(remote.releases),
            },
        )

    def pre_install(self, response: Any, args: Mapping[str, Any]) -> Any:
        """Block installs over a version-controlled checkout of this package."""
        plugin = args.get("plugin")
        is_plugin = isinstance(plugin, str) and plugin.startswith(f"{self.slug}/")
        is_theme = args.get("theme") == self.slug
        if not is_plugin and not is_theme:
            return response

        if has_vcs_checkout(self.install_dir):
            log_event("install_blocked", level=logging.WARNING, slug=self.slug)
            return HostError(
                "git_present",
                f"Update blocked: {self.slug} contains a .git directory.",
            )
        return response

    def report_lifecycle_event(self, action: str) -> None:
        self.client.send_event(action)

    def on_activate(self) -> None:
        self.report_lifecycle_event("activate")

    def on_deactivate(self) -> None:
        self.report_lifecycle_event("deactivate")


__all__ = ["UpdateChecker", "format_changelog"]
