"""Tests for SettingsMigrationSnapshot and its builder."""

import dataclasses

import pytest

from wifimigrate.errors import InvalidArgumentError
from wifimigrate.migration import SETTING_FIELDS, SettingsMigrationSnapshot

DEFAULTS = (False, False, None, True, False, True, False)


class TestDefaults:
    def test_builder_without_setters_yields_documented_defaults(self):
        snapshot = SettingsMigrationSnapshot.Builder().build()
        assert snapshot.as_tuple() == DEFAULTS

    def test_default_snapshot_has_no_changed_fields(self):
        assert SettingsMigrationSnapshot.Builder().build().non_default_fields() == []

    def test_field_table_matches_declared_order(self):
        names = [f.name for f in dataclasses.fields(SettingsMigrationSnapshot)]
        assert names == [f.name for f in SETTING_FIELDS]
        assert tuple(f.default for f in SETTING_FIELDS) == DEFAULTS


class TestBuilder:
    def test_all_setters(self):
        snapshot = (
            SettingsMigrationSnapshot.Builder()
            .set_scan_always_available(True)
            .set_p2p_factory_reset_pending(True)
            .set_p2p_device_name("Pixel 4")
            .set_soft_ap_timeout_enabled(False)
            .set_wakeup_enabled(True)
            .set_scan_throttle_enabled(False)
            .set_verbose_logging_enabled(True)
            .build()
        )
        assert snapshot.scan_always_available is True
        assert snapshot.p2p_factory_reset_pending is True
        assert snapshot.p2p_device_name == "Pixel 4"
        assert snapshot.soft_ap_timeout_enabled is False
        assert snapshot.wakeup_enabled is True
        assert snapshot.scan_throttle_enabled is False
        assert snapshot.verbose_logging_enabled is True
        assert snapshot.non_default_fields() == [f.name for f in SETTING_FIELDS]

    def test_setter_overwrites_prior_value(self):
        builder = SettingsMigrationSnapshot.Builder().set_p2p_device_name("old")
        builder.set_p2p_device_name("new").set_p2p_device_name(None)
        assert builder.build().p2p_device_name is None

    @pytest.mark.parametrize(
        ("setter", "value"),
        [
            ("set_scan_always_available", 1),
            ("set_wakeup_enabled", "true"),
            ("set_verbose_logging_enabled", None),
            ("set_p2p_device_name", 42),
        ],
    )
    def test_setter_rejects_wrong_type(self, setter, value):
        builder = SettingsMigrationSnapshot.Builder()
        with pytest.raises(InvalidArgumentError):
            getattr(builder, setter)(value)
        assert builder.build().as_tuple() == DEFAULTS

    def test_from_snapshot_copies_values(self):
        original = SettingsMigrationSnapshot.Builder().set_wakeup_enabled(True).build()
        copy = SettingsMigrationSnapshot.Builder.from_snapshot(original).build()
        assert copy == original

    def test_snapshot_is_frozen(self):
        snapshot = SettingsMigrationSnapshot.Builder().build()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.wakeup_enabled = True

    def test_only_verbose_logging_changed(self):
        snapshot = SettingsMigrationSnapshot.Builder().set_verbose_logging_enabled(True).build()
        assert snapshot.non_default_fields() == ["verbose_logging_enabled"]


class TestDirectConstruction:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"wakeup_enabled": 1},
            {"scan_throttle_enabled": "false"},
            {"verbose_logging_enabled": None},
            {"p2p_device_name": 42},
        ],
    )
    def test_rejects_wrong_type(self, kwargs):
        with pytest.raises(InvalidArgumentError):
            SettingsMigrationSnapshot(**kwargs)

    def test_matches_builder(self):
        direct = SettingsMigrationSnapshot(wakeup_enabled=True, p2p_device_name="Pixel")
        built = (
            SettingsMigrationSnapshot.Builder()
            .set_wakeup_enabled(True)
            .set_p2p_device_name("Pixel")
            .build()
        )
        assert direct == built
