"""Global settings read from a connected Android device over ADB."""

import logging
from typing import Optional

from adbutils import AdbDevice, AdbError, adb

from wifimigrate.errors import SettingsUnavailableError
from wifimigrate.settings_provider.provider import SettingsProvider

logger = logging.getLogger("wifimigrate")

# `settings get` prints this literal for a key that was never written.
UNSET_VALUE = "null"


class AdbSettingsProvider(SettingsProvider):
    """
    Reads ``settings get global <key>`` through adbutils.

    adb failures (no device, server unreachable, shell errors) are raised as
    SettingsUnavailableError.
    """

    def __init__(self, serial: Optional[str] = None, device: Optional[AdbDevice] = None):
        self._serial = serial
        self._device = device

    @property
    def device(self) -> AdbDevice:
        if self._device is None:
            try:
                self._device = adb.device(serial=self._serial)
            except (AdbError, OSError) as e:
                raise SettingsUnavailableError(
                    f"Cannot connect to device {self._serial or '<default>'}: {e}"
                ) from e
            logger.debug(f"Connected to device {self._device.serial}")
        return self._device

    def get_string(self, key: str) -> Optional[str]:
        device = self.device
        try:
            output = device.shell(f"settings get global {key}").strip()
        except (AdbError, OSError) as e:
            raise SettingsUnavailableError(f"Cannot read setting {key}: {e}") from e
        if not output or output == UNSET_VALUE:
            return None
        return output

    def __repr__(self) -> str:
        return f"<AdbSettingsProvider serial={self._serial!r}>"
