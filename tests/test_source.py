"""Tests for migration sources and settings providers."""

import logging
from unittest.mock import MagicMock

import pytest
from adbutils import AdbError

from wifimigrate.errors import SettingsUnavailableError
from wifimigrate.migration import (
    DefaultMigrationSource,
    MigrationEnvironment,
    SettingsMigrationSnapshot,
    load_settings_from_provider,
)
from wifimigrate.settings_provider import AdbSettingsProvider, InMemorySettingsProvider


class TestInMemorySettingsProvider:
    def test_values_are_stored_as_strings(self):
        provider = InMemorySettingsProvider({"a": True, "b": 0, "c": "name", "d": None})
        assert provider.get_string("a") == "1"
        assert provider.get_string("b") == "0"
        assert provider.get_string("c") == "name"
        assert provider.get_string("d") is None

    def test_get_int_default_when_unset(self, empty_settings):
        assert empty_settings.get_int("missing", 7) == 7

    def test_get_int_falls_back_on_garbage(self, caplog):
        provider = InMemorySettingsProvider({"wifi_wakeup_enabled": "yes"})
        with caplog.at_level(logging.WARNING, logger="wifimigrate"):
            assert provider.get_int("wifi_wakeup_enabled", 0) == 0
        assert "non-integer" in caplog.text


class TestLoadSettings:
    def test_empty_provider_gives_defaults(self, empty_settings):
        snapshot = load_settings_from_provider(empty_settings)
        assert snapshot == SettingsMigrationSnapshot()
        assert snapshot.as_tuple() == (False, False, None, True, False, True, False)

    def test_reads_every_key(self):
        provider = InMemorySettingsProvider(
            {
                "wifi_scan_always_enabled": 1,
                "wifi_p2p_pending_factory_reset": 1,
                "wifi_p2p_device_name": "Pixel",
                "soft_ap_timeout_enabled": 0,
                "wifi_wakeup_enabled": 1,
                "wifi_scan_throttle_enabled": 0,
                "wifi_verbose_logging_enabled": 1,
            }
        )
        snapshot = load_settings_from_provider(provider)
        assert snapshot.as_tuple() == (True, True, "Pixel", False, True, False, True)

    def test_only_one_counts_as_enabled(self):
        provider = InMemorySettingsProvider({"wifi_wakeup_enabled": 2})
        assert load_settings_from_provider(provider).wakeup_enabled is False


class TestDefaultMigrationSource:
    def test_config_is_absent(self):
        assert DefaultMigrationSource().load_config_snapshot() is None

    def test_settings_come_from_environment(self):
        provider = InMemorySettingsProvider({"wifi_verbose_logging_enabled": 1})
        snapshot = DefaultMigrationSource().load_settings_snapshot(
            MigrationEnvironment(settings=provider)
        )
        assert snapshot.non_default_fields() == ["verbose_logging_enabled"]


class TestAdbSettingsProvider:
    @pytest.fixture
    def device(self):
        values = {
            "wifi_scan_always_enabled": "1\n",
            "wifi_p2p_device_name": "Galaxy S10\n",
        }

        def shell(command):
            key = command.rsplit(" ", 1)[-1]
            return values.get(key, "null\n")

        device = MagicMock()
        device.shell.side_effect = shell
        return device

    def test_reads_global_settings(self, device):
        provider = AdbSettingsProvider(device=device)
        assert provider.get_string("wifi_p2p_device_name") == "Galaxy S10"
        device.shell.assert_called_with("settings get global wifi_p2p_device_name")

    def test_null_output_is_unset(self, device):
        provider = AdbSettingsProvider(device=device)
        assert provider.get_string("wifi_wakeup_enabled") is None
        assert provider.get_int("soft_ap_timeout_enabled", 1) == 1

    def test_snapshot_from_device(self, device):
        snapshot = load_settings_from_provider(AdbSettingsProvider(device=device))
        assert snapshot.scan_always_available is True
        assert snapshot.p2p_device_name == "Galaxy S10"
        assert snapshot.soft_ap_timeout_enabled is True
        assert snapshot.non_default_fields() == ["scan_always_available", "p2p_device_name"]

    def test_connects_lazily(self, monkeypatch, device):
        connect = MagicMock(return_value=device)
        monkeypatch.setattr("wifimigrate.settings_provider.adb.adb.device", connect)
        provider = AdbSettingsProvider(serial="emulator-5554")
        connect.assert_not_called()
        provider.get_string("wifi_scan_always_enabled")
        connect.assert_called_once_with(serial="emulator-5554")

    def test_shell_failure_is_wrapped(self, device):
        device.shell.side_effect = AdbError("closed")
        provider = AdbSettingsProvider(device=device)
        with pytest.raises(SettingsUnavailableError, match="wifi_wakeup_enabled"):
            provider.get_string("wifi_wakeup_enabled")

    def test_missing_device_is_wrapped(self, monkeypatch):
        connect = MagicMock(side_effect=AdbError("device 'nope' not found"))
        monkeypatch.setattr("wifimigrate.settings_provider.adb.adb.device", connect)
        provider = AdbSettingsProvider(serial="nope")
        with pytest.raises(SettingsUnavailableError, match="nope"):
            load_settings_from_provider(provider)
