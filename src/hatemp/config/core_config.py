from dataclasses import dataclass
from functools import cached_property
from typing import Annotated

from pydantic import AliasChoices, BeforeValidator, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from hatemp.const import LOG_LEVELS


@dataclass(frozen=True)
class StateSource:
    """Read the temperature from the entity's state value."""

    def describe(self, entity_id: str) -> str:
        return f"state of {entity_id}"


@dataclass(frozen=True)
class AttributeSource:
    """Read the temperature from a named attribute of the entity."""

    field: str

    def describe(self, entity_id: str) -> str:
        return f"attribute {self.field!r} of {entity_id}"


TemperatureSource = StateSource | AttributeSource
"""Where a temperature is read from. Exactly one is active per lookup."""


class ExtractionConfig(BaseSettings):
    """Everything needed to look up one temperature from the hub.

    Values are taken from keyword arguments first and then from `HATEMP__*` environment variables.
    Instances are frozen; nothing in hatemp changes them after construction.
    """

    model_config = SettingsConfigDict(
        env_prefix="hatemp__",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        use_attribute_docstrings=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type["BaseSettings"],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # configuration files belong to the embedding program, only init and env are read here
        return (init_settings, env_settings)

    base_url: str = Field(default="http://127.0.0.1:8123")
    """Base URL of the Home Assistant instance, without the /api suffix."""

    token: str = Field(
        default=...,
        validation_alias=AliasChoices("token", "hatemp__token", "ha_token", "home_assistant_token"),
        repr=False,
    )
    """Long-lived access token for the Home Assistant instance."""

    entity_id: str = Field(default=...)
    """Entity to read, e.g. 'sensor.outdoor_temperature'."""

    temperature_field: str | None = Field(default=None)
    """Attribute holding the temperature. When unset the entity's state is used instead."""

    log_level: Annotated[LOG_LEVELS, BeforeValidator(str.upper)] = Field(default="INFO")
    """Logging level for the embedding program, passed to `enable_logging`."""

    @cached_property
    def source(self) -> TemperatureSource:
        """The source selected by `temperature_field`."""
        if self.temperature_field is None:
            return StateSource()
        return AttributeSource(self.temperature_field)
