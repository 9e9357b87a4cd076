"""Global settings providers."""

from wifimigrate.settings_provider.adb import AdbSettingsProvider
from wifimigrate.settings_provider.provider import InMemorySettingsProvider, SettingsProvider

__all__ = [
    "SettingsProvider",
    "InMemorySettingsProvider",
    "AdbSettingsProvider",
]
