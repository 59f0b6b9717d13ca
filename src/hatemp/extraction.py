"""Read a single temperature from a Home Assistant entity.

The lookup is a fixed sequence with no fallback: build a client, fetch the entity's state once, pick
the candidate string from either the state value or a named attribute, and parse it as a float.
Any failure aborts the lookup with a `TemperatureError` subclass describing the failed step.
"""

import math
import re
from logging import getLogger

from hatemp.api import HubClient
from hatemp.config import AttributeSource, ExtractionConfig, StateSource, TemperatureSource
from hatemp.exceptions import (
    ClientConstructionError,
    HttpStatusError,
    MissingAttributesError,
    MissingFieldError,
    MissingStateError,
    NonStringFieldError,
    ParseError,
    TransportError,
)
from hatemp.models import EntityState

LOGGER = getLogger(__name__)

FLOAT_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
"""Decimal float literal: no whitespace, no digit separators, no inf/nan."""


def parse_temperature(candidate: str) -> float:
    """Parse a candidate string as a finite float.

    Raises:
        ParseError: If the string is not a plain decimal literal or overflows to infinity.
    """
    if not candidate:
        detail = "cannot parse float from empty string"
    elif not FLOAT_LITERAL.fullmatch(candidate):
        detail = "invalid float literal"
    else:
        value = float(candidate)
        if math.isfinite(value):
            return value
        detail = "value is out of range"

    raise ParseError(f"cannot parse temperature '{candidate}': {detail}", candidate=candidate)


def extract_candidate(state: EntityState, source: TemperatureSource, entity_id: str) -> str:
    """Pick the string to parse from an entity state.

    Args:
        state: The fetched entity state.
        source: Which part of the state holds the temperature.
        entity_id: Entity the state belongs to, used in error messages.

    Returns:
        The candidate string.

    Raises:
        MissingStateError: Reading the state value but the entity has none.
        MissingAttributesError: Reading an attribute but the entity has no attributes.
        MissingFieldError: The attribute is not present.
        NonStringFieldError: The attribute is present but not a string.
    """
    match source:
        case StateSource():
            if state.state is None:
                raise MissingStateError(f"no state value for {entity_id}", entity_id=entity_id)
            return state.state

        case AttributeSource(field=field):
            if state.attributes is None:
                raise MissingAttributesError(f"no attributes for {entity_id}", entity_id=entity_id, field=field)

            if field not in state.attributes:
                raise MissingFieldError(f"no field {field} in attributes", entity_id=entity_id, field=field)

            value = state.attributes[field]
            if not isinstance(value, str):
                raise NonStringFieldError(f"field {field} is not a string", entity_id=entity_id, field=field)
            return value


async def get_temperature(config: ExtractionConfig) -> float:
    """Fetch the configured entity from the hub and return its temperature.

    Args:
        config: Connection details, the entity to read and, optionally, the attribute to read from.

    Returns:
        The temperature as a finite float.

    Raises:
        ClientConstructionError: The base URL or token is unusable.
        HttpStatusError: The hub rejected the state request.
        TransportError: The state request failed or returned an undecodable body.
        MissingStateError, MissingAttributesError, MissingFieldError, NonStringFieldError: The
            configured source is not present in the entity's state.
        ParseError: The candidate string is not a number.
    """
    entity_id = config.entity_id

    try:
        client = HubClient(config.base_url, config.token)
    except ClientConstructionError as err:
        raise err.with_context("failed to create client") from err

    async with client:
        try:
            state = await client.get_state(entity_id)
        except (HttpStatusError, TransportError) as err:
            raise err.with_context(f"failed to get state for {entity_id}", entity_id=entity_id) from err

    LOGGER.debug("Reading temperature from %s", config.source.describe(entity_id))

    candidate = extract_candidate(state, config.source, entity_id)
    return parse_temperature(candidate)
