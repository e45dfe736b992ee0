"""Unit tests for common label, timestamp and settings helpers."""

import pytest
from datetime import datetime, timezone, timedelta

from common.config import BaseAppSettings
from common.utils import format_activity_label, success_response
from common.utils.timestamps import to_utc_datetime, to_iso_string, utc_date_string, window_start
from career import configure_logging
from career.config import Settings


# ─────────────────────────────────────────────────────────────────
# format_activity_label
# ─────────────────────────────────────────────────────────────────


class TestFormatActivityLabel:
    @pytest.mark.parametrize("raw, expected", [
        ("job-application", "Job Application"),
        ("resume-upload", "Resume Upload"),
        ("assessment-completed", "Assessment Completed"),
        ("other", "Other"),
        ("ATS-check", "ATS Check"),
        ("linkedIn-post", "LinkedIn Post"),
        ("", ""),
    ])
    def test_formats_label(self, raw, expected):
        assert format_activity_label(raw) == expected

    def test_keeps_repeated_separators(self):
        assert format_activity_label("badge--earned") == "Badge  Earned"


# ─────────────────────────────────────────────────────────────────
# Timestamps
# ─────────────────────────────────────────────────────────────────


class TestTimestamps:
    def test_parses_zulu_string(self):
        assert to_utc_datetime("2024-01-01T08:00:00Z") == datetime(2024, 1, 1, 8, tzinfo=timezone.utc)

    def test_converts_offsets_to_utc(self):
        result = to_utc_datetime("2024-01-01T08:00:00+02:00")

        assert result == datetime(2024, 1, 1, 6, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc

    def test_naive_is_utc(self):
        assert to_utc_datetime(datetime(2024, 3, 1)).tzinfo == timezone.utc

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_values(self, value):
        assert to_utc_datetime(value) is None
        assert to_iso_string(value) is None

    def test_unparseable_string_raises(self):
        with pytest.raises(ValueError):
            to_utc_datetime("last tuesday")

    def test_date_string_and_window(self):
        now = datetime(2024, 1, 15, tzinfo=timezone.utc)

        assert utc_date_string("2024-01-01T23:59:59-01:00") == "2024-01-02"
        assert window_start(now, 7) == now - timedelta(days=7)
        assert to_iso_string(now) == "2024-01-15T00:00:00Z"


# ─────────────────────────────────────────────────────────────────
# Responses
# ─────────────────────────────────────────────────────────────────


class TestResponses:
    def test_success_response(self):
        assert success_response({"a": 1}, message="ok") == {"success": True, "data": {"a": 1}, "message": "ok"}
        assert success_response() == {"success": True}


# ─────────────────────────────────────────────────────────────────
# Settings
# ─────────────────────────────────────────────────────────────────


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("ACTIVITY_TIMELINE_DAYS", "RECENT_PROGRESS_DAYS", "INSIGHT_LOOKBACK_DAYS",
                     "LOW_PROGRESS_THRESHOLD", "LOW_ACTIVITY_THRESHOLD", "ACTIVITY_FEED_LIMIT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.ACTIVITY_TIMELINE_DAYS == 30
        assert settings.RECENT_PROGRESS_DAYS == 7
        assert settings.INSIGHT_LOOKBACK_DAYS == 7
        assert settings.LOW_PROGRESS_THRESHOLD == 50
        assert settings.LOW_ACTIVITY_THRESHOLD == 3
        assert settings.ACTIVITY_FEED_LIMIT == 50
        settings.validate_required()

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ACTIVITY_TIMELINE_DAYS", "14")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.ACTIVITY_TIMELINE_DAYS == 14
        assert settings.is_production()

    def test_validate_required_lists_errors(self):
        settings = Settings(_env_file=None, RECENT_PROGRESS_DAYS=0, LOW_PROGRESS_THRESHOLD=120)

        with pytest.raises(ValueError) as exc_info:
            settings.validate_required()

        assert "RECENT_PROGRESS_DAYS" in str(exc_info.value)
        assert "LOW_PROGRESS_THRESHOLD" in str(exc_info.value)

    def test_analytics_fields_live_on_app_settings(self):
        analytics_fields = {"ACTIVITY_TIMELINE_DAYS", "RECENT_PROGRESS_DAYS", "INSIGHT_LOOKBACK_DAYS",
                            "LOW_PROGRESS_THRESHOLD", "LOW_ACTIVITY_THRESHOLD", "ACTIVITY_FEED_LIMIT"}

        assert analytics_fields.isdisjoint(BaseAppSettings.model_fields)
        assert analytics_fields <= set(Settings.model_fields)

    def test_base_settings_reject_unknown_log_level(self):
        settings = BaseAppSettings(_env_file=None, LOG_LEVEL="chatty")

        with pytest.raises(ValueError, match="LOG_LEVEL"):
            settings.validate_required()


# ─────────────────────────────────────────────────────────────────
# Logging
# ─────────────────────────────────────────────────────────────────


class TestConfigureLogging:
    def test_applies_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr("logging.basicConfig", lambda **kwargs: calls.update(kwargs))

        configure_logging("debug")

        assert calls["level"] == "DEBUG"
        assert "%(name)s" in calls["format"]
