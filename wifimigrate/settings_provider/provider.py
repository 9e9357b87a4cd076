import logging
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Union

logger = logging.getLogger("wifimigrate")


class SettingsProvider(ABC):
    """Read access to a global key-value settings store."""

    @abstractmethod
    def get_string(self, key: str) -> Optional[str]:
        """
        Return the raw value stored under ``key``.

        Args:
            key: Global settings key

        Returns:
            The stored value, or None if the key is not set
        """
        pass

    def get_int(self, key: str, default: int) -> int:
        """Return the value under ``key`` as an int, or ``default`` if unset or not numeric."""
        raw = self.get_string(key)
        if raw is None:
            return default
        try:
            return int(raw.strip())
        except ValueError:
            logger.warning(
                f"Setting {key} has non-integer value {raw!r}, using default {default}"
            )
            return default


class InMemorySettingsProvider(SettingsProvider):
    """Settings held in a plain mapping."""

    def __init__(self, values: Optional[Mapping[str, Union[str, int, bool, None]]] = None):
        self._values = {}
        for key, value in (values or {}).items():
            self.put(key, value)

    def put(self, key: str, value: Union[str, int, bool, None]) -> None:
        if value is None:
            self._values.pop(key, None)
        elif isinstance(value, bool):
            self._values[key] = "1" if value else "0"
        else:
            self._values[key] = str(value)

    def get_string(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def __repr__(self) -> str:
        return f"<InMemorySettingsProvider keys={sorted(self._values)}>"
