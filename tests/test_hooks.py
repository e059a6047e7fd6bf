from gforms_gtm.hooks import HookRegistry


def test_filters_run_by_priority_then_registration_order():
    hooks = HookRegistry()
    hooks.add_filter("f", lambda v: v + ["late"], 20)
    hooks.add_filter("f", lambda v: v + ["first"], 10)
    hooks.add_filter("f", lambda v: v + ["second"], 10)
    assert hooks.apply_filters("f", []) == ["first", "second", "late"]


def test_accepted_args_limits_arguments():
    hooks = HookRegistry()
    seen = []
    hooks.add_filter("f", lambda v: seen.append(("one", v)) or v)
    hooks.add_filter("f", lambda v, a, b: seen.append(("three", v, a, b)) or v, 10, 3)
    assert hooks.apply_filters("f", "x", "a", "b", "c") == "x"
    assert seen == [("one", "x"), ("three", "x", "a", "b")]


def test_unregistered_filter_returns_value():
    assert HookRegistry().apply_filters("none", 5) == 5


def test_actions():
    hooks = HookRegistry()
    calls = []
    hooks.add_action("init", lambda: calls.append("init"), 10, 0)
    hooks.add_action("save", lambda x: calls.append(x), 10, 1)
    hooks.do_action("init")
    hooks.do_action("save", "entry", "ignored")
    assert calls == ["init", "entry"]
    assert hooks.has("init") and not hooks.has("missing")
