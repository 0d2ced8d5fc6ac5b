"""
Configuration for motu-volume.

The device table is compiled in (see const.DEFAULT_DEVICES) and can be
extended or overridden by a small JSON file:

    {
      "address": "192.168.1.20",
      "devices": {
        "phones": {
          "property": "datastore/ext/obank/0/ch/0/stereoTrim",
          "mute_property": "datastore/ext/obank/0/ch/0/mute",
          "scale": "linear",
          "max": -20,
          "min": -100,
          "zero_volume": -127
        }
      }
    }

Everything is validated up front so a broken table aborts before any command
touches the device.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import voluptuous as vol

from .const import DEFAULT_ADDRESS, DEFAULT_DEVICES, VOLUME_SOUND
from .errors import ConfigurationError
from .models import Device, Scale

if TYPE_CHECKING:
    from collections.abc import Mapping

_LOGGER = logging.getLogger(__name__)

SCALE_ALIASES = {
    "linear": Scale.LINEAR,
    "log": Scale.LOGARITHMIC,
    "logarithmic": Scale.LOGARITHMIC,
}


def _coerce_scale(value: Any) -> Scale:
    if isinstance(value, Scale):
        return value
    try:
        return SCALE_ALIASES[str(value).lower()]
    except KeyError as err:
        msg = f"unknown scale: {value}"
        raise vol.Invalid(msg) from err


DEVICE_SCHEMA = vol.Schema(
    {
        vol.Required("property"): vol.All(str, vol.Length(min=1)),
        vol.Required("mute_property"): vol.All(str, vol.Length(min=1)),
        vol.Required("scale"): _coerce_scale,
        vol.Required("max"): vol.Coerce(float),
        vol.Required("min"): vol.Coerce(float),
        vol.Optional("zero_volume", default=0.0): vol.Coerce(float),
    }
)

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional("address"): vol.All(str, vol.Length(min=1)),
        vol.Optional("sound"): vol.All(str, vol.Length(min=1)),
        vol.Optional("devices", default=dict): {str: dict},
    }
)


def build_device(name: str, data: Mapping[str, Any]) -> Device:
    """Validate a raw device entry and return the Device it describes."""
    try:
        validated = DEVICE_SCHEMA(dict(data))
    except vol.Invalid as err:
        msg = f"invalid device {name!r}: {err}"
        raise ConfigurationError(msg) from err

    device = Device(**validated)
    if device.max <= device.min:
        msg = (
            f"invalid device {name!r}: "
            f"max ({device.max}) must exceed min ({device.min})"
        )
        raise ConfigurationError(msg)
    if device.scale is Scale.LOGARITHMIC and device.zero_volume != 0:
        msg = f"invalid device {name!r}: logarithmic zero volume should be zero"
        raise ConfigurationError(msg)
    return device


def load_devices(
    overrides: Mapping[str, Mapping[str, Any]] | None = None,
) -> Mapping[str, Device]:
    """Return the read-only device table, built-ins merged with overrides."""
    raw: dict[str, Mapping[str, Any]] = dict(DEFAULT_DEVICES)
    if overrides:
        raw.update(overrides)
    devices = {name: build_device(name, data) for name, data in raw.items()}
    _LOGGER.debug("Loaded devices: %s", ", ".join(sorted(devices)))
    return MappingProxyType(devices)


@dataclass(frozen=True)
class Config:
    """Resolved runtime configuration."""

    address: str = DEFAULT_ADDRESS
    sound: str = VOLUME_SOUND
    devices: Mapping[str, Device] = field(default_factory=load_devices)


def load_config(path: str | Path | None = None) -> Config:
    """Load a JSON config file, or the built-in defaults when path is None."""
    if path is None:
        return Config()

    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as err:
        msg = f"failed to read config {path}: {err}"
        raise ConfigurationError(msg) from err
    except ValueError as err:
        msg = f"failed to parse config {path}: {err}"
        raise ConfigurationError(msg) from err

    try:
        validated = CONFIG_SCHEMA(raw)
    except vol.Invalid as err:
        msg = f"invalid config {path}: {err}"
        raise ConfigurationError(msg) from err

    _LOGGER.debug("Loaded config from %s", path)
    return Config(
        address=validated.get("address", DEFAULT_ADDRESS),
        sound=validated.get("sound", VOLUME_SOUND),
        devices=load_devices(validated["devices"]),
    )
