import json
import urllib.error

from gforms_gtm import utils


class Resp:
    def __init__(self, body=b"", status=200):
        self.body = body
        self.status = status

    def __enter__(self):
        return self

    def __exit__(self, *a):
        return False

    def read(self):
        return self.body


def test_http_request_json_ok(monkeypatch):
    seen = {}

    def fake_urlopen(req, timeout):
        seen["req"] = req
        seen["timeout"] = timeout
        return Resp(json.dumps({"ok": 1}).encode("utf-8"))

    monkeypatch.setattr(utils.urllib.request, "urlopen", fake_urlopen)
    data, err = utils.http_request_json(
        "http://x/api", headers={"Accept": "application/json"}, timeout=10
    )
    assert data == {"ok": 1} and err is None
    assert seen["timeout"] == 10
    assert seen["req"].get_method() == "GET"
    assert seen["req"].get_header("Accept") == "application/json"


def test_http_request_json_post_form(monkeypatch):
    seen = {}

    def fake_urlopen(req, timeout):
        seen["req"] = req
        return Resp(b"")

    monkeypatch.setattr(utils.urllib.request, "urlopen", fake_urlopen)
    data, err = utils.http_request_json(
        "http://x/analytics/activate", method="POST", form={"php_version": "8.2"}
    )
    assert data is None and err is None
    assert seen["req"].get_method() == "POST"
    assert seen["req"].data == b"php_version=8.2"


def test_http_request_json_http_error(monkeypatch):
    def boom(*a, **k):
        raise urllib.error.HTTPError("http://x", 500, "uh oh", {}, None)

    monkeypatch.setattr(utils.urllib.request, "urlopen", boom)
    data, err = utils.http_request_json("http://x")
    assert data is None and "HTTP 500" in err


def test_http_request_json_non_200(monkeypatch):
    monkeypatch.setattr(
        utils.urllib.request, "urlopen", lambda *a, **k: Resp(b"{}", status=204)
    )
    data, err = utils.http_request_json("http://x")
    assert data is None and err == "HTTP 204"


def test_http_request_json_bad_json(monkeypatch):
    monkeypatch.setattr(
        utils.urllib.request, "urlopen", lambda *a, **k: Resp(b"<html>oops</html>")
    )
    data, err = utils.http_request_json("http://x")
    assert data is None and err.startswith("Invalid JSON")


def test_http_request_json_timeout(monkeypatch):
    def slow(*a, **k):
        raise TimeoutError("timed out")

    monkeypatch.setattr(utils.urllib.request, "urlopen", slow)
    assert utils.http_request_json("http://x") == (None, "timed out")


def test_is_empty_matches_php():
    for value in (None, False, 0, 0.0, "", "0", [], {}):
        assert utils.is_empty(value), value
    for value in ("a", "0.0", 1, ["x"], True):
        assert not utils.is_empty(value), value
