"""Tests registry des plugins — file process-wide, drain one-shot."""
import logging

import pytest

from section_builder import Builder, InstallContext, PluginRegistry, plugins, register_component, use


def test_register_non_callable_is_ignored(caplog):
    registry = PluginRegistry()
    with caplog.at_level(logging.WARNING):
        assert registry.register("pas une fonction") is False
    assert len(registry) == 0
    assert "n'est pas une fonction" in caplog.text


def test_non_callable_does_not_abort_others():
    calls = []
    registry = PluginRegistry()
    registry.register(lambda ctx, opts: calls.append("a"))
    registry.register(42)
    registry.register(lambda ctx, opts: calls.append("b"))
    registry.drain(InstallContext(builder=None))
    assert calls == ["a", "b"]


def test_drain_runs_in_order_with_options_and_context():
    seen = []
    registry = PluginRegistry()
    registry.register(lambda ctx, opts: seen.append((ctx.builder, opts)), {"x": 1})
    registry.register(lambda ctx, opts: seen.append((ctx.runtime, opts)))
    count = registry.drain(InstallContext(builder="B", runtime="R"))
    assert count == 2
    assert seen == [("B", {"x": 1}), ("R", {})]
    assert registry.pending == []


def test_failing_installer_is_consumed_alone(caplog):
    calls = []
    registry = PluginRegistry()

    def boom(ctx, opts):
        raise RuntimeError("boom")

    registry.register(boom)
    registry.register(lambda ctx, opts: calls.append(1))
    with caplog.at_level(logging.ERROR), pytest.raises(RuntimeError):
        registry.drain(InstallContext(builder=None))
    assert "en échec" in caplog.text
    assert len(registry) == 1
    assert calls == []

    assert registry.drain(InstallContext(builder=None)) == 1
    assert calls == [1]
    assert len(registry) == 0


def test_plugins_after_failure_install_on_next_builder():
    ran = []

    def boom(ctx, opts):
        raise RuntimeError("boom")

    use(boom)
    use(lambda ctx, opts: ran.append(ctx.builder))
    with pytest.raises(RuntimeError):
        Builder()
    b = Builder()
    assert ran == [b]
    assert len(plugins) == 0


def test_builder_construction_drains_queue():
    calls = []
    use(lambda ctx, opts: calls.append(ctx.builder))
    b = Builder()
    assert calls == [b]
    assert len(plugins) == 0


def test_second_builder_does_not_rerun_drained_plugins():
    calls = []
    use(lambda ctx, opts: calls.append("first"))
    Builder()
    use(lambda ctx, opts: calls.append("late"))
    Builder()
    Builder()
    assert calls == ["first", "late"]


def test_register_component_is_deferred():
    register_component("hero", {"data": {"title": ""}})
    assert len(plugins) == 3  # styler + mixin + composant
    b = Builder()
    assert "hero" in b.components


def test_default_plugins_attach_styler_and_mixin():
    b = Builder({"columnsPrefix": {"mobile": "m-"}})
    assert b.mixin.columns_prefix == {"mobile": "m-"}
    assert b.styler is not None
