from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from typing import List, NamedTuple, Optional, Union

from wifimigrate.errors import InvalidArgumentError


class SettingField(NamedTuple):
    """One migrated global setting: snapshot field, settings key, default."""

    name: str
    key: str
    default: Union[bool, str, None]


# Declared order. The transfer codec writes the fields in this order.
SETTING_FIELDS = (
    SettingField("scan_always_available", "wifi_scan_always_enabled", False),
    SettingField("p2p_factory_reset_pending", "wifi_p2p_pending_factory_reset", False),
    SettingField("p2p_device_name", "wifi_p2p_device_name", None),
    SettingField("soft_ap_timeout_enabled", "soft_ap_timeout_enabled", True),
    SettingField("wakeup_enabled", "wifi_wakeup_enabled", False),
    SettingField("scan_throttle_enabled", "wifi_scan_throttle_enabled", True),
    SettingField("verbose_logging_enabled", "wifi_verbose_logging_enabled", False),
)

SETTING_DEFAULTS = {f.name: f.default for f in SETTING_FIELDS}


def _check_value(name: str, value):
    if name == "p2p_device_name":
        if value is not None and not isinstance(value, str):
            raise InvalidArgumentError(
                f"p2p_device_name must be a str or None, got {type(value).__name__}"
            )
    elif not isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a bool, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class SettingsMigrationSnapshot:
    """Container for the global Wi-Fi settings to migrate."""

    scan_always_available: bool = False
    p2p_factory_reset_pending: bool = False
    p2p_device_name: Optional[str] = None
    soft_ap_timeout_enabled: bool = True
    wakeup_enabled: bool = False
    scan_throttle_enabled: bool = True
    verbose_logging_enabled: bool = False

    def __post_init__(self) -> None:
        for f in SETTING_FIELDS:
            _check_value(f.name, getattr(self, f.name))

    def as_tuple(self) -> tuple:
        """Field values in declared order."""
        return astuple(self)

    def non_default_fields(self) -> List[str]:
        """Names of the fields whose value differs from its default, in declared order."""
        return [
            f.name
            for f in fields(self)
            if getattr(self, f.name) != SETTING_DEFAULTS[f.name]
        ]

    class Builder:
        """
        Accumulates fields for a :class:`SettingsMigrationSnapshot`.

        Every field starts at its documented default, so a field the legacy
        source has no value for never needs a setter call.
        """

        def __init__(self) -> None:
            self._values = dict(SETTING_DEFAULTS)

        @classmethod
        def from_snapshot(
            cls, snapshot: SettingsMigrationSnapshot
        ) -> "SettingsMigrationSnapshot.Builder":
            builder = cls()
            for f in SETTING_FIELDS:
                builder._values[f.name] = getattr(snapshot, f.name)
            return builder

        def _set_flag(self, name: str, value: bool) -> "SettingsMigrationSnapshot.Builder":
            self._values[name] = _check_value(name, value)
            return self

        def set_scan_always_available(self, available: bool) -> "SettingsMigrationSnapshot.Builder":
            """Allow scans even when Wi-Fi is toggled off."""
            return self._set_flag("scan_always_available", available)

        def set_p2p_factory_reset_pending(self, pending: bool) -> "SettingsMigrationSnapshot.Builder":
            """Whether a Wi-Fi Direct factory reset request is pending."""
            return self._set_flag("p2p_factory_reset_pending", pending)

        def set_p2p_device_name(self, name: Optional[str]) -> "SettingsMigrationSnapshot.Builder":
            """The Wi-Fi Direct device name, or None if never set."""
            self._values["p2p_device_name"] = _check_value("p2p_device_name", name)
            return self

        def set_soft_ap_timeout_enabled(self, enabled: bool) -> "SettingsMigrationSnapshot.Builder":
            """Whether the soft AP shuts down after a period with no clients."""
            return self._set_flag("soft_ap_timeout_enabled", enabled)

        def set_wakeup_enabled(self, enabled: bool) -> "SettingsMigrationSnapshot.Builder":
            """Whether Wi-Fi turns back on near saved networks."""
            return self._set_flag("wakeup_enabled", enabled)

        def set_scan_throttle_enabled(self, enabled: bool) -> "SettingsMigrationSnapshot.Builder":
            """Whether app initiated scans are throttled."""
            return self._set_flag("scan_throttle_enabled", enabled)

        def set_verbose_logging_enabled(self, enabled: bool) -> "SettingsMigrationSnapshot.Builder":
            """Whether verbose Wi-Fi logging is on."""
            return self._set_flag("verbose_logging_enabled", enabled)

        def build(self) -> SettingsMigrationSnapshot:
            return SettingsMigrationSnapshot(**self._values)
