from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional, Tuple

from wifimigrate.errors import InvalidArgumentError
from wifimigrate.records import AccessPointRecord, NetworkRecord


def _check_networks(networks) -> Tuple[NetworkRecord, ...]:
    if networks is None:
        raise InvalidArgumentError("saved networks must not be None")
    if isinstance(networks, (str, bytes)) or not isinstance(networks, Sequence):
        raise InvalidArgumentError(
            f"saved networks must be a sequence, got {type(networks).__name__}"
        )
    for index, network in enumerate(networks):
        if not isinstance(network, NetworkRecord):
            raise InvalidArgumentError(
                f"saved network at index {index} is {type(network).__name__}, "
                "expected NetworkRecord"
            )
    return tuple(networks)


def _check_ap_configuration(config) -> AccessPointRecord:
    if config is None:
        raise InvalidArgumentError("access point configuration must not be None")
    if not isinstance(config, AccessPointRecord):
        raise InvalidArgumentError(
            f"access point configuration is {type(config).__name__}, "
            "expected AccessPointRecord"
        )
    return config


@dataclass(frozen=True)
class ConfigMigrationSnapshot:
    """
    Container for the config store data to migrate.

    A field left as ``None`` means the legacy store had nothing to migrate for
    it. This is different from the producer returning no snapshot at all,
    which means no config migration is needed.
    """

    saved_networks: Optional[Tuple[NetworkRecord, ...]] = None
    ap_configuration: Optional[AccessPointRecord] = None

    def __post_init__(self) -> None:
        # Direct construction gets the builder's checks; any sequence becomes a tuple.
        if self.saved_networks is not None:
            object.__setattr__(self, "saved_networks", _check_networks(self.saved_networks))
        if self.ap_configuration is not None:
            _check_ap_configuration(self.ap_configuration)

    @property
    def is_empty(self) -> bool:
        """True when neither field carries data."""
        return self.saved_networks is None and self.ap_configuration is None

    class Builder:
        """Accumulates fields for a :class:`ConfigMigrationSnapshot`."""

        def __init__(self) -> None:
            self._saved_networks: Optional[Tuple[NetworkRecord, ...]] = None
            self._ap_configuration: Optional[AccessPointRecord] = None

        def set_saved_networks(
            self, networks: Sequence[NetworkRecord]
        ) -> "ConfigMigrationSnapshot.Builder":
            """
            Set the user's saved networks parsed from the legacy store.

            Pass an empty sequence, not ``None``, when there are no networks.

            Raises:
                InvalidArgumentError: If ``networks`` is None, not a sequence,
                    or holds something other than NetworkRecord.
            """
            self._saved_networks = _check_networks(networks)
            return self

        def set_ap_configuration(
            self, config: AccessPointRecord
        ) -> "ConfigMigrationSnapshot.Builder":
            """
            Set the user's soft AP configuration parsed from the legacy store.

            Raises:
                InvalidArgumentError: If ``config`` is None or not an AccessPointRecord.
            """
            self._ap_configuration = _check_ap_configuration(config)
            return self

        def build(self) -> ConfigMigrationSnapshot:
            return ConfigMigrationSnapshot(
                saved_networks=self._saved_networks,
                ap_configuration=self._ap_configuration,
            )
