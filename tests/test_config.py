import json

import pytest

from gforms_gtm.config import PluginConfig
from gforms_gtm.errors import ConfigError


def test_defaults():
    config = PluginConfig()
    assert config.redirect_delay == 2000
    assert config.redirect_spinner_color == "#000"
    assert config.redirect_interstitial.startswith("We are processing")
    assert config.registry_url == "https://wordpress.level-cdn.com/api/packages"


def test_load_precedence(tmp_path):
    path = tmp_path / "gforms-gtm.json"
    path.write_text(
        json.dumps({"redirect_delay": 1000, "redirect_spinner_color": "#f00", "unknown": 1}),
        encoding="utf-8",
    )
    config = PluginConfig.load(
        path,
        environ={"GFORMS_GTM_REDIRECT_DELAY": "1500", "GFORMS_GTM_PACKAGE_TYPE": "theme"},
        overrides={"redirect_spinner_color": None, "redirect_interstitial": "Wait"},
    )
    assert config.redirect_delay == 1500
    assert config.redirect_spinner_color == "#f00"
    assert config.package_type == "theme"
    assert config.redirect_interstitial == "Wait"


def test_load_without_file_uses_environment():
    config = PluginConfig.load(environ={"GFORMS_GTM_REGISTRY_URL": "https://r.test"})
    assert config.registry_url == "https://r.test"


def test_invalid_file(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError):
        PluginConfig.from_file(path)
    with pytest.raises(ConfigError):
        PluginConfig.from_file(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "overrides",
    [
        {"package_type": "mu-plugin"},
        {"redirect_delay": "soon"},
        {"redirect_delay": -1},
        {"registry_url": 42},
    ],
)
def test_invalid_values(overrides):
    with pytest.raises(ConfigError):
        PluginConfig().with_overrides(overrides)
