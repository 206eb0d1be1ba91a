from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from forumkit.utils.logger import ConsoleLogger
from forumkit.utils.settings import SettingsManager


def test_settings_defaults():
    settings = SettingsManager(_env_file=None)

    assert settings.debug_mode is False
    assert settings.trace_mode is False
    assert settings.log_time_zone == ZoneInfo("UTC")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("FORUMKIT_DEBUG_MODE", "true")
    monkeypatch.setenv("FORUMKIT_TRACE_MODE", "1")
    monkeypatch.setenv("FORUMKIT_LOG_TIME_ZONE", "Europe/Berlin")

    settings = SettingsManager(_env_file=None)

    assert settings.debug_mode is True
    assert settings.trace_mode is True
    assert settings.log_time_zone == ZoneInfo("Europe/Berlin")


def test_settings_empty_time_zone_falls_back_to_utc():
    assert SettingsManager(_env_file=None, log_time_zone="").log_time_zone == ZoneInfo("UTC")


def test_settings_rejects_empty_date_format():
    with pytest.raises(ValidationError):
        SettingsManager(_env_file=None, log_date_format="  ")


def test_logger_trace_gating(capsys):
    ConsoleLogger(trace_enabled=False).trace("hidden")
    assert capsys.readouterr().out == ""

    ConsoleLogger(trace_enabled=True).trace("shown")
    out = capsys.readouterr().out
    assert "TRACE" in out
    assert "shown" in out


def test_logger_debug_gating(capsys):
    ConsoleLogger(debug_enabled=False).debug("hidden")
    assert capsys.readouterr().out == ""

    ConsoleLogger(debug_enabled=True).debug("shown")
    assert "shown" in capsys.readouterr().out


def test_logger_trace_as_decoder_sink(capsys):
    from forumkit.decoding.forum_tag_decoder import decode_forum_tag_json

    logger = ConsoleLogger(trace_enabled=True)
    decode_forum_tag_json('{"id": "1", "moderated": false, "name": "x", "extra": 1}', logger.trace)

    assert 'unknown key: "extra"' in capsys.readouterr().out


def test_log_settings(capsys):
    ConsoleLogger(debug_enabled=True).log_settings(SettingsManager(_env_file=None))

    out = capsys.readouterr().out
    assert '"debug_mode"' in out
    assert '"log_date_format"' in out
