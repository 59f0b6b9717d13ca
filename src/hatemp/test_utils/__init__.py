"""Mock hub server and pytest fixtures used by the hatemp test suite.

Register the fixtures with ``pytest_plugins = ["hatemp.test_utils.fixtures"]``.
"""

from .fixtures import TEST_TOKEN, hub_client_with_mock, make_config, mock_hub, run_mock_hub, unused_port_url
from .helpers import make_sensor_state_dict, make_state_dict, make_weather_state_dict
from .test_server import Expectation, RecordedRequest, SimpleTestServer

__all__ = [
    "TEST_TOKEN",
    "Expectation",
    "RecordedRequest",
    "SimpleTestServer",
    "hub_client_with_mock",
    "make_config",
    "make_sensor_state_dict",
    "make_state_dict",
    "make_weather_state_dict",
    "mock_hub",
    "run_mock_hub",
    "unused_port_url",
]
