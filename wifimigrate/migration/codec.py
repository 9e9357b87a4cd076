"""
Transfer codec for migration snapshots.

Both snapshot types are encoded to a linear byte sequence so they can cross a
process or version boundary. Every payload starts with a header::

    magic "WFMG" | uint16 format version | uint8 payload kind

Config payload (kind 1)::

    int32 snapshot present (0/1)
    int32 saved network count (-1 = absent), then one JSON blob per network
    int32 access point present (0/1), then one JSON blob

Settings payload (kind 2): the seven settings in declared order, booleans as
int32 0/1 and the device name as a length-prefixed string (-1 = None).
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from wifimigrate.errors import MalformedTransferDataError
from wifimigrate.migration.config_snapshot import ConfigMigrationSnapshot
from wifimigrate.migration.parcel import Parcel
from wifimigrate.migration.settings_snapshot import SETTING_FIELDS, SettingsMigrationSnapshot
from wifimigrate.records import AccessPointRecord, NetworkRecord

logger = logging.getLogger("wifimigrate")

MAGIC = b"WFMG"
FORMAT_VERSION = 1
# Versions this build can read. Producer and consumer differ by at most one step.
READABLE_VERSIONS = frozenset({FORMAT_VERSION})

KIND_CONFIG = 1
KIND_SETTINGS = 2

_RecordT = TypeVar("_RecordT", bound=BaseModel)


class TransferCodec:
    """Encodes and decodes migration snapshots."""

    # ---------------- header ----------------
    @staticmethod
    def _write_header(parcel: Parcel, kind: int) -> None:
        parcel.write_raw(MAGIC)
        parcel.write_uint16(FORMAT_VERSION)
        parcel.write_uint8(kind)

    @staticmethod
    def _read_header(parcel: Parcel, kind: int) -> int:
        magic = parcel.read_raw(len(MAGIC), "magic")
        if magic != MAGIC:
            raise MalformedTransferDataError(f"bad magic {magic!r}, expected {MAGIC!r}")
        version = parcel.read_uint16("format version")
        if version not in READABLE_VERSIONS:
            raise MalformedTransferDataError(f"unsupported format version {version}")
        found = parcel.read_uint8("payload kind")
        if found != kind:
            raise MalformedTransferDataError(
                f"payload kind {found} does not match expected kind {kind}"
            )
        return version

    # ---------------- records ----------------
    @staticmethod
    def _write_record(parcel: Parcel, record: BaseModel) -> None:
        parcel.write_blob(record.model_dump_json().encode("utf-8"))

    @staticmethod
    def _read_record(parcel: Parcel, model: Type[_RecordT], what: str) -> _RecordT:
        data = parcel.read_blob(what)
        if data is None:
            raise MalformedTransferDataError(f"{what} payload is null")
        try:
            return model.model_validate_json(data)
        except ValidationError as e:
            raise MalformedTransferDataError(f"invalid {what}: {e}") from e

    # ---------------- config ----------------
    def encode_config(self, snapshot: Optional[ConfigMigrationSnapshot]) -> bytes:
        """Encode a config snapshot; ``None`` encodes "no config migration"."""
        parcel = Parcel()
        self._write_header(parcel, KIND_CONFIG)
        parcel.write_bool(snapshot is not None)
        if snapshot is not None:
            networks = snapshot.saved_networks
            if networks is None:
                parcel.write_int32(-1)
            else:
                parcel.write_int32(len(networks))
                for network in networks:
                    self._write_record(parcel, network)
            parcel.write_bool(snapshot.ap_configuration is not None)
            if snapshot.ap_configuration is not None:
                self._write_record(parcel, snapshot.ap_configuration)
        return parcel.to_bytes()

    def decode_config(self, data: bytes) -> Optional[ConfigMigrationSnapshot]:
        """
        Decode bytes produced by :meth:`encode_config`.

        Returns:
            The snapshot, or None when the producer had no config migration.

        Raises:
            MalformedTransferDataError: If the bytes are truncated or malformed.
        """
        parcel = Parcel(data)
        self._read_header(parcel, KIND_CONFIG)
        if not parcel.read_bool("config present"):
            parcel.expect_end()
            return None

        builder = ConfigMigrationSnapshot.Builder()
        count = parcel.read_length("saved networks")
        if count >= 0:
            networks = [
                self._read_record(parcel, NetworkRecord, f"saved network {i}")
                for i in range(count)
            ]
            builder.set_saved_networks(networks)
        if parcel.read_bool("access point present"):
            builder.set_ap_configuration(
                self._read_record(parcel, AccessPointRecord, "access point configuration")
            )
        parcel.expect_end()
        return builder.build()

    # ---------------- settings ----------------
    def encode_settings(self, snapshot: SettingsMigrationSnapshot) -> bytes:
        parcel = Parcel()
        self._write_header(parcel, KIND_SETTINGS)
        for field in SETTING_FIELDS:
            value = getattr(snapshot, field.name)
            if field.name == "p2p_device_name":
                parcel.write_string(value)
            else:
                parcel.write_bool(value)
        return parcel.to_bytes()

    def decode_settings(self, data: bytes) -> SettingsMigrationSnapshot:
        """
        Decode bytes produced by :meth:`encode_settings`.

        Raises:
            MalformedTransferDataError: If the bytes are truncated or malformed.
        """
        parcel = Parcel(data)
        self._read_header(parcel, KIND_SETTINGS)
        values = {}
        for field in SETTING_FIELDS:
            if field.name == "p2p_device_name":
                values[field.name] = parcel.read_string(field.name)
            else:
                values[field.name] = parcel.read_bool(field.name)
        parcel.expect_end()
        return SettingsMigrationSnapshot(**values)


# ---------------- transfer files ----------------
def write_transfer(
    path: Union[str, Path],
    config: Optional[ConfigMigrationSnapshot],
    settings: SettingsMigrationSnapshot,
    codec: Optional[TransferCodec] = None,
) -> Path:
    """
    Write both payloads to one file, config first.

    The file is written next to ``path`` and renamed into place, so a failed
    write never leaves a partial transfer file behind.
    """
    codec = codec or TransferCodec()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    parcel = Parcel()
    parcel.write_blob(codec.encode_config(config))
    parcel.write_blob(codec.encode_settings(settings))

    tmp_path = path.with_name(path.name + ".tmp")
    try:
        tmp_path.write_bytes(parcel.to_bytes())
        tmp_path.replace(path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
    logger.debug(f"Wrote migration transfer file {path}")
    return path


def read_transfer_payloads(path: Union[str, Path]) -> Tuple[bytes, bytes]:
    """Split a transfer file into its raw config and settings payloads."""
    parcel = Parcel(Path(path).read_bytes())
    config_bytes = parcel.read_blob("config payload")
    settings_bytes = parcel.read_blob("settings payload")
    if config_bytes is None or settings_bytes is None:
        raise MalformedTransferDataError("transfer file has a null payload")
    parcel.expect_end()
    return config_bytes, settings_bytes


def read_transfer(
    path: Union[str, Path], codec: Optional[TransferCodec] = None
) -> Tuple[Optional[ConfigMigrationSnapshot], SettingsMigrationSnapshot]:
    """Read a file written by :func:`write_transfer`."""
    codec = codec or TransferCodec()
    config_bytes, settings_bytes = read_transfer_payloads(path)
    return codec.decode_config(config_bytes), codec.decode_settings(settings_bytes)
