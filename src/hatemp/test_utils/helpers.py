from typing import Any

TIMESTAMP = "2024-01-01T00:00:00+00:00"


def make_state_dict(
    entity_id: str,
    state: str | None,
    attributes: dict[str, Any] | None = None,
    last_changed: str = TIMESTAMP,
    last_updated: str = TIMESTAMP,
) -> dict[str, Any]:
    """Build a state payload shaped like the hub's `GET /api/states/<entity_id>` response."""
    return {
        "entity_id": entity_id,
        "state": state,
        "attributes": attributes,
        "last_changed": last_changed,
        "last_updated": last_updated,
        "context": {"id": "01HZZZZZZZZZZZZZZZZZZZZZZZ", "parent_id": None, "user_id": None},
    }


def make_sensor_state_dict(
    entity_id: str = "sensor.outdoor",
    state: str | None = "21.5",
    unit_of_measurement: str = "°C",
    **attributes: Any,
) -> dict[str, Any]:
    """Build a temperature sensor state payload."""
    return make_state_dict(
        entity_id,
        state,
        {"unit_of_measurement": unit_of_measurement, "device_class": "temperature", **attributes},
    )


def make_weather_state_dict(
    entity_id: str = "sensor.weather",
    state: str | None = "sunny",
    temperature: Any = "23.5",
    **attributes: Any,
) -> dict[str, Any]:
    """Build a weather-style state payload carrying the temperature as an attribute."""
    return make_state_dict(entity_id, state, {"temperature": temperature, "humidity": "45", **attributes})
