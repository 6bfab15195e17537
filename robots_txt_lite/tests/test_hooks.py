import pytest

from robots_txt_lite.hooks import HookRegistry


def test_apply_filters_without_subscribers_returns_value():
    hooks = HookRegistry()
    assert hooks.apply_filters("robots_txt", "original", True) == "original"


def test_apply_filters_runs_in_priority_order():
    hooks = HookRegistry()
    hooks.add_filter("title", lambda value: value + "-late", priority=20)
    hooks.add_filter("title", lambda value: value + "-first")
    hooks.add_filter("title", lambda value: value + "-second")
    hooks.add_filter("title", lambda value: value + "-early", priority=5)
    assert hooks.apply_filters("title", "x") == "x-early-first-second-late"


def test_apply_filters_passes_only_accepted_args():
    hooks = HookRegistry()
    received = []

    def one_arg(value):
        received.append((value,))
        return value

    def two_args(value, public):
        received.append((value, public))
        return f"{value}:{public}"

    hooks.add_filter("robots_txt", one_arg)
    hooks.add_filter("robots_txt", two_args, 10, 2)
    assert hooks.apply_filters("robots_txt", "out", False, "ignored") == "out:False"
    assert received == [("out",), ("out", False)]


def test_do_action_calls_subscribers_with_args():
    hooks = HookRegistry()
    calls = []
    hooks.add_action("admin_enqueue_scripts", lambda hook, assets: calls.append((hook, assets)), accepted_args=2)
    hooks.add_action("admin_enqueue_scripts", lambda hook: calls.append((hook,)))
    hooks.do_action("admin_enqueue_scripts", "settings_page_x", "queue")
    assert calls == [("settings_page_x", "queue"), ("settings_page_x",)]


def test_do_action_without_args():
    hooks = HookRegistry()
    calls = []
    hooks.add_action("admin_init", lambda: calls.append("init"), accepted_args=0)
    hooks.add_action("admin_init", lambda: calls.append("again"))
    hooks.do_action("admin_init")
    assert calls == ["init", "again"]


def test_has_and_remove_filter():
    hooks = HookRegistry()

    def callback(value):
        return value

    assert hooks.has_filter("robots_txt") is False
    hooks.add_filter("robots_txt", callback, priority=15)
    assert hooks.has_filter("robots_txt") is True
    assert hooks.has_filter("robots_txt", callback) == 15

    # Wrong priority does not match
    assert hooks.remove_filter("robots_txt", callback) is False
    assert hooks.remove_filter("robots_txt", callback, priority=15) is True
    assert hooks.has_filter("robots_txt", callback) is False


def test_do_action_without_subscribers_is_a_no_op():
    HookRegistry().do_action("admin_menu", object())


def test_action_exceptions_propagate():
    hooks = HookRegistry()

    def broken():
        raise RuntimeError("boom")

    hooks.add_action("admin_init", broken, accepted_args=0)
    with pytest.raises(RuntimeError):
        hooks.do_action("admin_init")


def test_actions_of_separate_registries_are_independent():
    first, second = HookRegistry(), HookRegistry()
    calls = []
    first.add_action("admin_init", lambda: calls.append("first"), accepted_args=0)
    second.do_action("admin_init")
    assert calls == []
    first.do_action("admin_init")
    assert calls == ["first"]
