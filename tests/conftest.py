"""
Shared test configuration.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from legit_city.api import api_config as api_config_module  # noqa: E402
from legit_city.common import settings as settings_module  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_config_caches() -> Iterator[None]:
    """Keep cached settings from leaking between tests that patch the environment."""

    settings_module.get_settings.cache_clear()
    api_config_module.get_api_config.cache_clear()
    yield
    settings_module.get_settings.cache_clear()
    api_config_module.get_api_config.cache_clear()
