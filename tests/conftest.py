"""Pytest fixtures for wifimigrate tests."""

from __future__ import annotations

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings

from wifimigrate.config_manager import ConfigManager
from wifimigrate.records import AccessPointRecord, Band, MeteredOverride, NetworkRecord, SecurityType
from wifimigrate.settings_provider import InMemorySettingsProvider

settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset the config singleton and the package logger between tests."""
    ConfigManager._reset_instance_for_testing()
    logger = logging.getLogger("wifimigrate")
    yield
    ConfigManager._reset_instance_for_testing()
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def home_network() -> NetworkRecord:
    return NetworkRecord(ssid="HomeNet", security=SecurityType.WPA2_PSK, pre_shared_key="hunter22")


@pytest.fixture
def office_network() -> NetworkRecord:
    return NetworkRecord(
        ssid="Office",
        security=SecurityType.WPA2_EAP,
        hidden=True,
        metered_override=MeteredOverride.NOT_METERED,
    )


@pytest.fixture
def hotspot() -> AccessPointRecord:
    return AccessPointRecord(
        ssid="MyHotspot",
        passphrase="secret123",
        band=Band.BAND_5GHZ,
        channel=36,
        max_clients=4,
    )


@pytest.fixture
def empty_settings() -> InMemorySettingsProvider:
    return InMemorySettingsProvider()
