from __future__ import annotations

import pytest

from keychord.runtime import telemetry


def test_get_logger_is_cached_per_name() -> None:
    assert telemetry.get_logger("keychord.test") is telemetry.get_logger(
        "keychord.test"
    )
    assert telemetry.get_logger("keychord.test") is not telemetry.get_logger(
        "keychord.other"
    )


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_preset_resets_logger_cache() -> None:
    before = telemetry.get_logger("keychord.test")

    telemetry.configure(preset="development")
    try:
        assert telemetry.get_logger("keychord.test") is not before
    finally:
        telemetry.configure()


def test_span_reraises_and_collects_metadata() -> None:
    with telemetry.span("test::ok", metadata={"actions": {"b", "a"}}) as handle:
        handle.add_metadata("count", 2)

    assert handle.metadata == {"actions": "['a', 'b']", "count": "2"}

    with pytest.raises(RuntimeError):
        with telemetry.span("test::boom", component=True):
            raise RuntimeError("boom")


def test_record_event_accepts_plain_data() -> None:
    telemetry.record_event("test.event", level="debug", data={"action": "jump"})
