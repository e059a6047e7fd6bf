import sys

from gforms_gtm import ui


def test_supports_color_env(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setattr(sys.stdout, "isatty", lambda: True)
    assert ui.supports_color() is True
    monkeypatch.setenv("NO_COLOR", "1")
    assert ui.supports_color() is False


def test_messages_plain_without_tty(monkeypatch, capsys):
    monkeypatch.setenv("NO_COLOR", "1")
    ui.ok("done")
    ui.err("bad")
    captured = capsys.readouterr()
    assert captured.out == "✓ done\n"
    assert captured.err == "✗ bad\n"
