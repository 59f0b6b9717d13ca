import pytest
from pydantic import ValidationError

from hatemp import AttributeSource, ExtractionConfig, StateSource


def test_source_is_state_without_field():
    """No temperature field selects the state value."""
    config = ExtractionConfig(token="t", entity_id="sensor.outdoor")

    assert config.source == StateSource()


def test_source_is_attribute_with_field():
    """A temperature field selects that attribute."""
    config = ExtractionConfig(token="t", entity_id="weather.home", temperature_field="temperature")

    assert config.source == AttributeSource("temperature")
    assert config.source is config.source, "The source should be derived once"


def test_defaults():
    """Only token and entity_id are required."""
    config = ExtractionConfig(token="t", entity_id="sensor.outdoor")

    assert config.base_url == "http://127.0.0.1:8123"
    assert config.temperature_field is None
    assert config.log_level == "INFO"


def test_missing_required_fields():
    """token and entity_id have no defaults."""
    with pytest.raises(ValidationError) as exc_info:
        ExtractionConfig()

    missing = {err["loc"][0] for err in exc_info.value.errors()}
    assert {"token", "entity_id"} <= missing, f"Expected token and entity_id to be reported, got {missing}"


def test_env_values_are_used(monkeypatch: pytest.MonkeyPatch):
    """HATEMP__ environment variables fill the configuration."""
    monkeypatch.setenv("HATEMP__BASE_URL", "https://hass.example.com")
    monkeypatch.setenv("HATEMP__TOKEN", "env-token")
    monkeypatch.setenv("HATEMP__ENTITY_ID", "weather.home")
    monkeypatch.setenv("HATEMP__TEMPERATURE_FIELD", "temperature")
    monkeypatch.setenv("HATEMP__LOG_LEVEL", "debug")

    config = ExtractionConfig()

    assert config.base_url == "https://hass.example.com"
    assert config.token == "env-token"
    assert config.entity_id == "weather.home"
    assert config.source == AttributeSource("temperature")
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("env_var", ["HA_TOKEN", "HOME_ASSISTANT_TOKEN"])
def test_token_aliases(monkeypatch: pytest.MonkeyPatch, env_var: str):
    """The token can come from the common Home Assistant variable names."""
    monkeypatch.setenv(env_var, "alias-token")

    config = ExtractionConfig(entity_id="sensor.outdoor")

    assert config.token == "alias-token"


def test_init_values_override_env(monkeypatch: pytest.MonkeyPatch):
    """Keyword arguments win over the environment."""
    monkeypatch.setenv("HATEMP__ENTITY_ID", "sensor.env")

    config = ExtractionConfig(token="t", entity_id="sensor.init")

    assert config.entity_id == "sensor.init"


def test_empty_env_values_are_ignored(monkeypatch: pytest.MonkeyPatch):
    """An empty temperature field variable does not switch to attribute mode."""
    monkeypatch.setenv("HATEMP__TEMPERATURE_FIELD", "")

    config = ExtractionConfig(token="t", entity_id="sensor.outdoor")

    assert config.source == StateSource()


def test_config_is_frozen():
    """The configuration cannot be changed after construction."""
    config = ExtractionConfig(token="t", entity_id="sensor.outdoor")

    with pytest.raises(ValidationError):
        config.temperature_field = "temperature"  # pyright: ignore[reportAttributeAccessIssue]

    assert config.source == StateSource()


def test_invalid_log_level():
    """Unknown log levels are rejected."""
    with pytest.raises(ValidationError):
        ExtractionConfig(token="t", entity_id="sensor.outdoor", log_level="verbose")


def test_token_hidden_from_repr():
    config = ExtractionConfig(token="super-secret", entity_id="sensor.outdoor")

    assert "super-secret" not in repr(config)
