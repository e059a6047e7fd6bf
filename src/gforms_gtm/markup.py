"""Small markup filters: form tag attributes, CSS variables, stylesheet."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Any, Dict, Mapping

from .confirmation import make_form_id
from .defaults import namespace
from .settings import FilteredSettings
from .types import SiteContext

STYLESHEET_PATH = "public/styles.css"
STYLESHEET_VERSION = "1.0.0"


@dataclass(frozen=True)
class StylesheetAsset:
    """Stylesheet registration for the host's asset queue."""

    handle: str
    url: str
    version: str
    deps: tuple = ()


def force_ajax_submission_mode(form_args: Mapping[str, Any]) -> Dict[str, Any]:
    """Force AJAX submission so confirmations render in place."""
    out = dict(form_args)
    out["ajax"] = True
    return out


def modify_form_tag(form_tag: str, form: Mapping[str, Any], site: SiteContext) -> str:
    """Add ``data-form-name``/``data-form-id`` ahead of ``data-formid``.

    Tags that already carry ``data-form-name`` are returned unchanged.
    """
    if "data-form-name" in form_tag:
        return form_tag
    name = escape(str(form.get("title", "")), quote=True)
    form_id = escape(make_form_id(site.blog_id, form.get("id")), quote=True)
    form_tag = form_tag.replace(
        "data-formid", f' data-form-name="{name}" data-formid'
    )
    form_tag = form_tag.replace(
        "data-formid", f' data-form-id="{form_id}" data-formid'
    )
    return form_tag


def css_vars(settings: FilteredSettings) -> str:
    variables = {
        "--gform-redirect-spinner-color": settings.spinner_color(),
    }
    body = ";".join(f"{key}: {value}" for key, value in variables.items())
    return "<style>\n:root {" + body + "}\n</style>"


def stylesheet(site: SiteContext) -> StylesheetAsset:
    return StylesheetAsset(
        handle=namespace("styles"),
        url=site.plugin_url + STYLESHEET_PATH,
        version=STYLESHEET_VERSION,
    )


__all__ = [
    "StylesheetAsset",
    "force_ajax_submission_mode",
    "modify_form_tag",
    "css_vars",
    "stylesheet",
    "STYLESHEET_PATH",
]
