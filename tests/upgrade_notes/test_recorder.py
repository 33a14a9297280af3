"""Tests for the update recorder."""

import logging

from upgrade_notes.models import Direction, PackageUpdateEvent
from upgrade_notes.recorder import UpdateRecorder


def record(recorder, name="acme/widgets", from_version="1.0.0", to_version="2.0.0", **kwargs):
    """Record a transition using pretty versions equal to the raw ones."""
    return recorder.record(
        name=name,
        pretty_name=kwargs.get("pretty_name", name),
        source_url=kwargs.get("source_url", f"https://example.com/{name}"),
        from_version=from_version,
        from_version_pretty=kwargs.get("from_version_pretty", from_version),
        to_version=to_version,
        to_version_pretty=kwargs.get("to_version_pretty", to_version),
    )


def test_records_upgrade():
    """Test that a newer target version is recorded as an upgrade."""
    recorder = UpdateRecorder()

    transition = record(recorder)

    assert transition.direction == Direction.UPGRADE
    assert recorder.all_transitions() == [transition]


def test_records_downgrade():
    """Test that an older target version is recorded as a downgrade."""
    recorder = UpdateRecorder()

    transition = record(recorder, from_version="2.0.0", to_version="1.5.0")

    assert transition.direction == Direction.DOWNGRADE


def test_unorderable_branch_is_downgrade():
    """Test that transitions involving a named branch do not raise and count as downgrades."""
    recorder = UpdateRecorder()

    transition = record(recorder, from_version="1.0.0", to_version="dev-feature")

    assert transition.direction == Direction.DOWNGRADE


def test_later_record_overwrites_earlier(caplog):
    """Test that only the last transition for a package is kept."""
    recorder = UpdateRecorder()
    record(recorder, to_version="1.5.0")

    with caplog.at_level(logging.DEBUG, logger="upgrade_notes.recorder"):
        second = record(recorder, from_version="1.5.0", to_version="2.0.0")

    assert len(recorder) == 1
    assert recorder.all_transitions() == [second]
    assert recorder.all_transitions()[0].from_version_pretty == "1.5.0"
    assert "Replacing recorded transition for acme/widgets" in caplog.text


def test_keeps_first_observation_order():
    """Test that overwriting a package does not move it to the end."""
    recorder = UpdateRecorder()
    record(recorder, name="acme/a")
    record(recorder, name="acme/b")
    record(recorder, name="acme/a", from_version="2.0.0", to_version="3.0.0")

    assert [t.name for t in recorder.all_transitions()] == ["acme/a", "acme/b"]


def test_missing_source_url_becomes_empty_string():
    """Test that a package without a source URL is stored with an empty one."""
    recorder = UpdateRecorder()

    transition = record(recorder, source_url=None)

    assert transition.source_url == ""


def test_membership_by_package_name():
    """Test that recorded packages can be looked up by name."""
    recorder = UpdateRecorder()
    record(recorder)

    assert "acme/widgets" in recorder
    assert "acme/gadgets" not in recorder


class TestRecordEvent:
    """Tests for recording dependency manager events."""

    def test_records_update_event(self):
        recorder = UpdateRecorder()
        event = PackageUpdateEvent(
            name="acme/widgets",
            pretty_name="Acme/Widgets",
            source_url="https://example.com/widgets.git",
            from_version="1.0.0.0",
            from_version_pretty="1.0.0",
            to_version="1.2.0.0",
            to_version_pretty="v1.2.0",
        )

        transition = recorder.record_event(event)

        assert transition.pretty_name == "Acme/Widgets"
        assert transition.from_version_pretty == "1.0.0"
        assert transition.to_version_pretty == "v1.2.0"
        assert transition.direction == Direction.UPGRADE

    def test_ignores_install_and_uninstall(self):
        recorder = UpdateRecorder()
        for operation in ("install", "uninstall"):
            event = PackageUpdateEvent(
                name="acme/widgets",
                pretty_name="acme/widgets",
                source_url="",
                from_version="1.0.0",
                from_version_pretty="1.0.0",
                to_version="1.0.0",
                to_version_pretty="1.0.0",
                operation=operation,
            )
            assert recorder.record_event(event) is None

        assert len(recorder) == 0
