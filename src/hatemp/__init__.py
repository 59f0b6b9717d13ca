import logging

from .api import HubClient
from .config import AttributeSource, ExtractionConfig, StateSource
from .exceptions import (
    ClientConstructionError,
    ErrorKind,
    HatempError,
    HttpStatusError,
    MissingAttributesError,
    MissingFieldError,
    MissingStateError,
    NonStringFieldError,
    ParseError,
    TemperatureError,
    TransportError,
)
from .extraction import get_temperature
from .logging_ import enable_logging
from .models import EntityState

logging.getLogger("hatemp").addHandler(logging.NullHandler())

__all__ = [
    "AttributeSource",
    "ClientConstructionError",
    "EntityState",
    "ErrorKind",
    "ExtractionConfig",
    "HatempError",
    "HttpStatusError",
    "HubClient",
    "MissingAttributesError",
    "MissingFieldError",
    "MissingStateError",
    "NonStringFieldError",
    "ParseError",
    "StateSource",
    "TemperatureError",
    "TransportError",
    "enable_logging",
    "get_temperature",
]
