import pytest

from lifesim.core.exceptions import (
    ConfigurationError,
    LifeSimError,
    PatternError,
    RenderError,
)


class TestLifeSimError:
    """Test LifeSimError base exception class."""

    def test_lifesim_error_creation_basic(self):
        """Test creating a LifeSimError with just a message."""
        msg = "Test error message"
        exc = LifeSimError(msg)

        assert str(exc) == msg
        assert exc.details == {}

    def test_lifesim_error_with_details(self):
        """Test creating a LifeSimError with details."""
        details = {"generation": 7, "population": 42}
        exc = LifeSimError("boom", details=details)

        assert str(exc) == "boom"
        assert exc.details == details

    def test_lifesim_error_none_details_defaults_to_empty(self):
        exc = LifeSimError("message", details=None)

        assert exc.details == {}

    def test_lifesim_error_inheritance(self):
        assert isinstance(LifeSimError("test"), Exception)


class TestConfigurationError:
    """Test ConfigurationError exception class."""

    def test_configuration_error_with_message_only(self):
        """Test ConfigurationError with only a message (treated as config_key)."""
        exc = ConfigurationError(config_key="Missing config key")

        assert "configuration" in str(exc).lower()
        assert "Missing config key" in str(exc)
        assert exc.config_key == "configuration"

    def test_configuration_error_with_key_and_message(self):
        exc = ConfigurationError(config_key="run.frame_rate", message="must be positive")

        assert str(exc) == "Configuration error for 'run.frame_rate': must be positive"
        assert exc.config_key == "run.frame_rate"

    def test_configuration_error_without_anything(self):
        exc = ConfigurationError()

        assert "Invalid configuration" in str(exc)

    def test_configuration_error_is_lifesim_error(self):
        with pytest.raises(LifeSimError):
            raise ConfigurationError("bad")


class TestPatternError:
    def test_pattern_error_default_message(self):
        exc = PatternError("glider")

        assert "glider" in str(exc)
        assert exc.name == "glider"
        assert exc.details == {"pattern": "glider"}

    def test_pattern_error_keeps_details(self):
        exc = PatternError("x", "custom", details={"path": "/tmp/x"})

        assert str(exc) == "custom"
        assert exc.details == {"path": "/tmp/x", "pattern": "x"}


def test_render_error_is_lifesim_error():
    exc = RenderError("write failed", details={"generation": 3})

    assert isinstance(exc, LifeSimError)
    assert exc.details["generation"] == 3
