# Assumptions:
# - Using pytest for testing framework
# - Testing settings loaded from environment variables

import pytest

from pio_events.config import Settings, get_settings
from pio_events.encoding import EventEncoder


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove any PIO_EVENTS_ variables from the environment"""
    for key in (
        "PIO_EVENTS_SERIALIZE_NULLS",
        "PIO_EVENTS_PRETTY_PRINTING",
        "PIO_EVENTS_LOG_LEVEL",
        "PIO_EVENTS_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    """Test cases for Settings"""

    def test_defaults(self):
        """Test default values"""
        settings = get_settings()

        assert settings.serialize_nulls is False
        assert settings.pretty_printing is False
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"

    def test_environment_overrides(self, monkeypatch):
        """Test prefixed environment variables override defaults"""
        monkeypatch.setenv("PIO_EVENTS_SERIALIZE_NULLS", "true")
        monkeypatch.setenv("PIO_EVENTS_PRETTY_PRINTING", "1")
        monkeypatch.setenv("PIO_EVENTS_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("pio_events_log_format", "console")

        settings = get_settings()

        assert settings.serialize_nulls is True
        assert settings.pretty_printing is True
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "console"

    def test_dotenv_file_not_read(self, monkeypatch, tmp_path):
        """Test a .env file in the working directory is ignored"""
        (tmp_path / ".env").write_text("PIO_EVENTS_SERIALIZE_NULLS=true\n")
        monkeypatch.chdir(tmp_path)

        assert get_settings().serialize_nulls is False

    def test_unprefixed_variables_ignored(self, monkeypatch):
        """Test plain variable names do not leak into settings"""
        monkeypatch.setenv("SERIALIZE_NULLS", "true")

        assert get_settings().serialize_nulls is False

    def test_encoder_from_settings(self):
        """Test encoder options mirror settings"""
        encoder = EventEncoder.from_settings(Settings(serialize_nulls=True, pretty_printing=True))

        assert encoder.serialize_nulls is True
        assert encoder.pretty_printing is True
