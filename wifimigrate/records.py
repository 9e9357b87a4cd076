"""
Typed network records carried by a config migration.

The migration core treats these as opaque values: it only stores, compares and
serializes them. They are frozen so a snapshot holding them stays immutable.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SecurityType(str, Enum):
    """Key management used by a network or access point."""

    OPEN = "open"
    WEP = "wep"
    WPA2_PSK = "wpa2-psk"
    WPA3_SAE = "wpa3-sae"
    WPA2_EAP = "wpa2-eap"
    OWE = "owe"


class MeteredOverride(str, Enum):
    """User override of the metered state of a network."""

    NONE = "none"
    METERED = "metered"
    NOT_METERED = "not-metered"


class Band(str, Enum):
    """Radio band the soft AP is allowed to use."""

    BAND_2GHZ = "2ghz"
    BAND_5GHZ = "5ghz"
    BAND_6GHZ = "6ghz"
    ANY = "any"


class NetworkRecord(BaseModel):
    """A user saved network."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ssid: str = Field(..., min_length=1, max_length=32, description="Network name")
    security: SecurityType = Field(default=SecurityType.OPEN)
    pre_shared_key: Optional[str] = Field(default=None, description="PSK or WEP key")
    hidden: bool = Field(default=False, description="SSID is not broadcast")
    bssid: Optional[str] = Field(default=None, description="Pinned access point MAC")
    metered_override: MeteredOverride = Field(default=MeteredOverride.NONE)
    mac_randomization: bool = Field(default=True)


class AccessPointRecord(BaseModel):
    """The user's soft AP (hotspot) configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ssid: Optional[str] = Field(default=None, max_length=32)
    bssid: Optional[str] = Field(default=None)
    passphrase: Optional[str] = Field(default=None)
    security: SecurityType = Field(default=SecurityType.WPA2_PSK)
    hidden: bool = Field(default=False)
    band: Band = Field(default=Band.BAND_2GHZ)
    channel: int = Field(default=0, ge=0, le=233, description="0 selects the channel automatically")
    max_clients: int = Field(default=0, ge=0, description="0 means no limit")
    auto_shutdown_enabled: bool = Field(default=True)
