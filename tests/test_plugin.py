import pytest

from gforms_gtm import utils
from gforms_gtm.errors import HostError
from gforms_gtm.hooks import HookRegistry
from gforms_gtm.plugin import Plugin
from gforms_gtm.types import Environment, SiteContext
from gforms_gtm.updater import PackageInfo, UpdateTransient

REMOTE = {
    "package": {"name": "GTM Adapter"},
    "releases": [{"version": "2.0.0", "tag_name": "v2.0.0", "download_url": "https://dl/x.zip"}],
}


@pytest.fixture
def plugin(tmp_path, monkeypatch):
    root = tmp_path / "gravityforms-gtm"
    root.mkdir()
    calls = []

    def fake(url, **kwargs):
        calls.append(url)
        return REMOTE, None

    monkeypatch.setattr(utils, "http_request_json", fake)
    p = Plugin(
        root / "gravityforms-gtm.php",
        "1.0.0",
        SiteContext(
            http_host="shop.example.com",
            plugin_url="https://shop.example.com/wp-content/plugins/gravityforms-gtm/",
        ),
        Environment(php_version="8.1"),
        hooks=HookRegistry(),
    )
    p.register()
    p.calls = calls
    return p


def test_register_only_adds_bootstrap_actions(plugin):
    assert plugin.hooks.has("init")
    assert plugin.hooks.has("admin_init")
    assert not plugin.hooks.has("gform_confirmation")
    assert not plugin.hooks.has("plugins_api")


def test_front_end_hooks(plugin):
    hooks = plugin.hooks
    hooks.do_action("init")
    out = hooks.apply_filters(
        "gform_confirmation",
        {"redirect": "https://shop.example.com/thanks"},
        {"id": 1, "title": "Quote", "fields": []},
        {"id": "12"},
        True,
    )
    assert 'window.location.replace("https://shop.example.com/thanks");' in out
    assert '"provider": "wordpress:shop.example.com"' in out
    assert hooks.apply_filters("gform_form_args", {"ajax": False}) == {"ajax": True}
    tag = hooks.apply_filters("gform_form_tag", "<form data-formid='1'>", {"id": 1, "title": "Q"})
    assert 'data-form-id="gravity-forms:1-1"' in tag

    hooks.do_action("wp_head")
    hooks.do_action("wp_enqueue_scripts")
    assert "--gform-redirect-spinner-color: #000" in plugin.head[0]
    assert plugin.styles[0].url.endswith("gravityforms-gtm/public/styles.css")


def test_admin_hooks(plugin, tmp_path):
    hooks = plugin.hooks
    hooks.do_action("admin_init")
    transient = UpdateTransient(checked={"gravityforms-gtm/gravityforms-gtm.php": "1.0.0"})
    result = hooks.apply_filters("pre_set_site_transient_update_plugins", transient)
    assert result.response["gravityforms-gtm/gravityforms-gtm.php"]["new_version"] == "2.0.0"

    info = hooks.apply_filters(
        "plugins_api", False, "plugin_information", {"slug": "gravityforms-gtm"}
    )
    assert isinstance(info, PackageInfo) and info.name == "GTM Adapter"
    assert len(plugin.calls) == 1

    (tmp_path / "gravityforms-gtm" / ".git").mkdir()
    blocked = hooks.apply_filters(
        "upgrader_pre_install", True, {"plugin": "gravityforms-gtm/gravityforms-gtm.php"}
    )
    assert isinstance(blocked, HostError)


def test_activation_telemetry(plugin):
    plugin.activate()
    plugin.deactivate()
    assert [url.rsplit("/", 1)[-1] for url in plugin.calls] == ["activate", "deactivate"]
