import os

import pytest

# this wants package.nested_directories.final_file_name
# do not include the name of the fixture
pytest_plugins = ["hatemp.test_utils.fixtures"]

ENV_PREFIXES = ("HATEMP__", "HA_TOKEN", "HOME_ASSISTANT_TOKEN", "TOKEN")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment from leaking into ExtractionConfig."""
    for key in list(os.environ):
        if key.upper().startswith(ENV_PREFIXES):
            monkeypatch.delenv(key)
