"""Tests for lifecycle events and the plugin."""

import pytest

from upgrade_notes.events import EventDispatcher, LifecycleEvent, UpgradeNotesPlugin
from upgrade_notes.models import PackageUpdateEvent
from upgrade_notes.output import BufferedOutput


def update_event(name="acme/widgets", from_version="1.0.0", to_version="2.0.0"):
    return PackageUpdateEvent(
        name=name,
        pretty_name=name,
        source_url=f"https://example.com/{name}",
        from_version=from_version,
        from_version_pretty=from_version,
        to_version=to_version,
        to_version_pretty=to_version,
    )


@pytest.fixture
def vendor_dir(tmp_path):
    package_dir = tmp_path / "acme" / "widgets"
    package_dir.mkdir(parents=True)
    (package_dir / "UPGRADE.md").write_text(
        "Upgrade from Widgets 1.5.0\n* rename foo\nUpgrade from Widgets 1.0.0\n* drop bar\n"
    )
    return tmp_path


class TestEventDispatcher:
    """Tests for the observer registration table."""

    def test_dispatch_calls_handlers_in_order(self):
        dispatcher = EventDispatcher()
        calls = []
        dispatcher.add_listener(LifecycleEvent.POST_UPDATE_CMD, lambda p: calls.append(("a", p)))
        dispatcher.add_listener(LifecycleEvent.POST_UPDATE_CMD, lambda p: calls.append(("b", p)))

        dispatcher.dispatch(LifecycleEvent.POST_UPDATE_CMD, "payload")

        assert calls == [("a", "payload"), ("b", "payload")]

    def test_dispatch_without_listeners_is_noop(self):
        dispatcher = EventDispatcher()
        dispatcher.dispatch(LifecycleEvent.PRE_UPDATE_CMD)
        assert dispatcher.listeners(LifecycleEvent.PRE_UPDATE_CMD) == []

    def test_handler_results_are_ignored(self):
        dispatcher = EventDispatcher()
        dispatcher.add_listener(LifecycleEvent.POST_UPDATE_CMD, lambda p: 3)

        assert dispatcher.dispatch(LifecycleEvent.POST_UPDATE_CMD) is None

    def test_remove_listener(self):
        dispatcher = EventDispatcher()
        calls = []

        def handler(payload):
            calls.append(payload)

        dispatcher.add_listener(LifecycleEvent.POST_PACKAGE_UPDATE, handler)
        dispatcher.remove_listener(LifecycleEvent.POST_PACKAGE_UPDATE, handler)
        dispatcher.dispatch(LifecycleEvent.POST_PACKAGE_UPDATE, "ignored")

        assert calls == []


class TestUpgradeNotesPlugin:
    """Tests for the plugin lifecycle."""

    def test_subscribed_events_name_existing_handlers(self):
        for event, method_name in UpgradeNotesPlugin.subscribed_events().items():
            assert isinstance(event, LifecycleEvent)
            assert callable(getattr(UpgradeNotesPlugin, method_name))

    def test_activate_registers_every_event(self, tmp_path):
        dispatcher = EventDispatcher()
        plugin = UpgradeNotesPlugin(tmp_path, BufferedOutput())

        plugin.activate(dispatcher)

        for event in LifecycleEvent:
            assert len(dispatcher.listeners(event)) == 1

        plugin.deactivate(dispatcher)

        for event in LifecycleEvent:
            assert dispatcher.listeners(event) == []

    def test_full_run_prints_notes(self, vendor_dir):
        dispatcher = EventDispatcher()
        output = BufferedOutput()
        plugin = UpgradeNotesPlugin(vendor_dir, output)
        plugin.activate(dispatcher)

        dispatcher.dispatch(LifecycleEvent.PRE_UPDATE_CMD)
        dispatcher.dispatch(LifecycleEvent.POST_PACKAGE_UPDATE, update_event())
        dispatcher.dispatch(LifecycleEvent.POST_UPDATE_CMD)

        assert "Seems you have upgraded acme/widgets from version 1.0.0 to 2.0.0." in output.text
        assert "* rename foo" in output.text
        assert "* drop bar" in output.text

    def test_only_last_transition_is_reported(self, vendor_dir):
        output = BufferedOutput()
        plugin = UpgradeNotesPlugin(vendor_dir, output)

        plugin.start_run()
        plugin.check_package_update(update_event(to_version="1.5.0"))
        plugin.check_package_update(update_event(from_version="1.5.0", to_version="2.0.0"))
        reported = plugin.show_upgrade_notes()

        assert reported == 1
        assert "from version 1.5.0 to 2.0.0" in output.text
        assert "from version 1.0.0" not in output.text
        assert "* rename foo" in output.text
        assert "* drop bar" not in output.text

    def test_recorder_is_discarded_after_run(self, vendor_dir):
        output = BufferedOutput()
        plugin = UpgradeNotesPlugin(vendor_dir, output)

        plugin.check_package_update(update_event())
        assert plugin.recorder is not None
        plugin.show_upgrade_notes()

        assert plugin.recorder is None
        assert plugin.show_upgrade_notes() == 0

    def test_new_run_starts_empty(self, vendor_dir):
        output = BufferedOutput()
        plugin = UpgradeNotesPlugin(vendor_dir, output)

        plugin.check_package_update(update_event())
        plugin.start_run()

        assert len(plugin.recorder) == 0
