"""Package registry client.

Talks to the self-hosted registry with two calls:
 - ``GET {base}/{slug}?action=version_check``: package metadata
 - ``POST {base}/{slug}/analytics/{action}``: life-cycle telemetry

Both are blocking with fixed timeouts and no retry. Failures are logged and
returned as ``None``; nothing here raises into the host request.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..defaults import (
    ANALYTICS_TIMEOUT,
    REGISTRY_BASE_URL,
    USER_AGENT,
    VERSION_CHECK_TIMEOUT,
)
from ..logging_utils import log_event
from ..types import Environment
from .. import utils
from .types import PackageMetadata


def default_headers(environment: Environment) -> Dict[str, str]:
    """Headers identifying the calling site, sent on every registry request."""
    return {
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
        "X-WordPress-Version": environment.wordpress_version,
        "X-PHP-Version": environment.php_version,
        "X-MySQL-Version": environment.mysql_version,
        "X-WordPress-Hostname": environment.hostname,
        "X-Server-Software": environment.server_software or "?",
    }


class RegistryClient:
    """HTTP client for one package in the registry."""

    def __init__(
        self,
        slug: str,
        environment: Environment,
        base_url: str = REGISTRY_BASE_URL,
    ) -> None:
        self.slug = slug
        self.environment = environment
        self.base_url = base_url.rstrip("/")

    def endpoint(self, path: str = "") -> str:
        return f"{self.base_url}/{self.slug}{path}"

    def fetch_metadata(self) -> Optional[PackageMetadata]:
        """Fetch package metadata; ``None`` on any transport or decode failure."""
        url = self.endpoint() + "?action=version_check"
        data, error = utils.http_request_json(
            url,
            headers=default_headers(self.environment),
            timeout=VERSION_CHECK_TIMEOUT,
        )
        if error or not isinstance(data, dict):
            log_event(
                "registry_fetch_failed",
                level=logging.WARNING,
                slug=self.slug,
                url=url,
                error=error or "unexpected response body",
            )
            return None
        metadata = PackageMetadata.from_dict(data)
        log_event(
            "registry_fetch_ok",
            level=logging.DEBUG,
            slug=self.slug,
            version=metadata.latest.version if metadata.latest else "",
        )
        return metadata

    def send_event(self, action: str) -> None:
        """Report a life-cycle ``action``; the response is ignored."""
        url = self.endpoint(f"/analytics/{action}")
        _, error = utils.http_request_json(
            url,
            method="POST",
            headers=default_headers(self.environment),
            form={"php_version": self.environment.php_version},
            timeout=ANALYTICS_TIMEOUT,
        )
        log_event(
            "registry_event_sent",
            level=logging.DEBUG,
            slug=self.slug,
            url=url,
            error=error,
        )


__all__ = ["RegistryClient", "default_headers"]
