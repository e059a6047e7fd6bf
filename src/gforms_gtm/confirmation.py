"""Confirmation override: submit event + redirect interstitial.

Replaces the form builder's confirmation output with markup that pushes a
``lvl.form_submit`` event onto ``window.dataLayer`` and, for redirect
confirmations, shows an interstitial message while a delayed client-side
redirect gives tag-manager tags time to fire.

Three confirmation shapes are handled:
 - ``{"redirect": url}``: interstitial + event + delayed redirect to ``url``
 - HTML containing the builder's ``gformRedirect`` script: the target is
   pulled from ``document.location.href="..."`` and re-emitted as a delayed
   redirect; when no target can be found the original HTML is kept
 - any other HTML: event script appended
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Mapping, Optional, Union

from .defaults import EVENT_NAME, FORM_ID_PREFIX, PROVIDER_PREFIX
from .fields import extract_field_values
from .logging_utils import log_event
from .settings import FilteredSettings
from .types import SiteContext, coerce_fields

Confirmation = Union[str, Mapping[str, Any]]

_REDIRECT_MARKER = "gformRedirect"
_REDIRECT_TARGET = re.compile(r'document\.location\.href="(.*)";')


def make_form_id(blog_id: int, form_id: Any) -> str:
    return f"{FORM_ID_PREFIX}:{blog_id}-{form_id}"


def make_provider_id(http_host: str) -> str:
    return f"{PROVIDER_PREFIX}:{http_host}"


def _script_json(value: Any) -> str:
    # "</" would let a value close the surrounding <script> element
    return json.dumps(value).replace("</", "<\\/")


def _decode_js_string(body: str) -> str:
    """Unescape the body of a double-quoted script string literal."""
    try:
        return json.loads('"' + body + '"')
    except ValueError:
        return body


class ConfirmationAdapter:
    """Renders confirmation output for a submitted form."""

    def __init__(self, site: SiteContext, settings: Optional[FilteredSettings] = None):
        self.site = site
        self.settings = settings or FilteredSettings()

    def event_descriptor(
        self, form: Mapping[str, Any], entry: Mapping[str, Any]
    ) -> Dict[str, Any]:
        provider = make_provider_id(self.site.http_host)
        return {
            "id": make_form_id(self.site.blog_id, form.get("id")),
            "name": form.get("title", ""),
            # kept for triggers written against the earlier key
            "platform": provider,
            "provider": provider,
            "field_values": extract_field_values(
                entry, coerce_fields(form.get("fields"))
            ),
        }

    def submit_event_script(self, descriptor: Mapping[str, Any]) -> str:
        return (
            "\n<script>\n"
            "window.dataLayer = window.dataLayer || [];\n"
            "dataLayer.push({\n"
            f"  event: {_script_json(EVENT_NAME)},\n"
            f"  form: {_script_json(descriptor)},\n"
            "});\n"
            "</script>\n"
        )

    def redirect_script(self, target: str) -> str:
        return (
            "\n<script>\n"
            "setTimeout(function(){\n"
            f"  window.location.replace({_script_json(target)});\n"
            f"}}, {self.settings.redirect_delay()});\n"
            "</script>\n"
        )

    def interstitial(self) -> str:
        return "\n".join(
            [
                '<div class="gform_interstitial_message">',
                '<div class="gform_interstitial_message_spinner"></div>',
                '<div class="gform_interstitial_message_text">'
                + self.settings.interstitial_text()
                + "</div>",
                "</div>",
            ]
        )

    def render_confirmation(
        self,
        confirmation: Confirmation,
        form: Mapping[str, Any],
        entry: Mapping[str, Any],
        is_ajax: bool = False,
    ) -> str:
        """Return the confirmation markup to send to the browser.

        ``is_ajax`` is accepted for filter compatibility; output is identical
        for both submission modes.
        """
        descriptor = self.event_descriptor(form, entry)
        event_script = self.submit_event_script(descriptor)

        if isinstance(confirmation, Mapping):
            target = confirmation.get("redirect")
            if target:
                target = str(target)
                log_event(
                    "confirmation_redirect",
                    level=logging.DEBUG,
                    form_id=descriptor["id"],
                    url=target,
                )
                return self.interstitial() + event_script + self.redirect_script(target)
            html = str(confirmation.get("message", ""))
        else:
            html = confirmation or ""

        if _REDIRECT_MARKER in html:
            match = _REDIRECT_TARGET.search(html)
            if match:
                target = _decode_js_string(match.group(1))
                return event_script + self.redirect_script(target)
            log_event(
                "confirmation_redirect_unparsed",
                level=logging.WARNING,
                form_id=descriptor["id"],
            )

        return html + event_script


__all__ = [
    "ConfirmationAdapter",
    "Confirmation",
    "make_form_id",
    "make_provider_id",
]
