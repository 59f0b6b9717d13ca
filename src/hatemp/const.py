from typing import Literal

LOG_LEVELS = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
"""Log levels accepted by `enable_logging` and the configuration."""

API_ROOT = "api"
"""Path segment appended to the hub base URL for all REST calls."""

REQUEST_TIMEOUT_SECONDS = 10
"""Total timeout applied to every request made by the hub client."""
