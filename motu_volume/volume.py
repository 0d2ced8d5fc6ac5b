"""
Volume stepping for MOTU channels.

Stepping happens on the displayed scale (dB for log devices) so every press
moves the perceived loudness by the same amount. The current value is rounded
up to a whole unit first so a value left mid-step by the MOTU UI still moves a
full step.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .const import MUTE_OFF, MUTE_ON, VOLUME_DENOMINATIONS
from .errors import ConfigurationError, UnexpectedStateError
from .models import Scale

if TYPE_CHECKING:
    from .models import Device


def step_size(device: Device) -> float:
    """Return the size of one step in displayed units."""
    return (device.max - device.min) / VOLUME_DENOMINATIONS


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _ceil(value: float) -> float:
    # math.ceil() rejects infinities; -inf is what a log device at 0 reads as
    if not math.isfinite(value):
        return value
    return float(math.ceil(value))


def _step(current: float, delta: float, *, increase: bool) -> float:
    if increase:
        return _ceil(current) + delta
    return _ceil(current) - delta


def new_volume_linear(device: Device, current: float, *, increase: bool) -> float:
    """Return the next raw value for a linear scale device."""
    new_volume = _step(current, step_size(device), increase=increase)

    # Go straight to zero volume once min is reached so the range isn't
    # skewed towards barely-audible values
    if not increase and new_volume <= device.min:
        return device.zero_volume

    return _clamp(new_volume, device.min, device.max)


def new_volume_log(device: Device, current: float, *, increase: bool) -> float:
    """Return the next amplitude ratio for a logarithmic scale device."""
    current_db = Scale.LOGARITHMIC.to_display(current)
    new_db = _step(current_db, step_size(device), increase=increase)

    if not increase and new_db <= device.min:
        if device.zero_volume != 0:
            msg = (
                "logarithmic zero volume should be zero, "
                f"got {device.zero_volume} for {device.property}"
            )
            raise ConfigurationError(msg)
        return device.zero_volume

    new_db = _clamp(new_db, device.min, device.max)

    # Bound the amplitude ratio to [0, 1] against float overshoot
    return _clamp(Scale.LOGARITHMIC.from_display(new_db), 0.0, 1.0)


def new_volume(device: Device, current: float, *, increase: bool) -> float:
    """Return the next raw value to write for the device's scale."""
    match device.scale:
        case Scale.LINEAR:
            return new_volume_linear(device, current, increase=increase)
        case Scale.LOGARITHMIC:
            return new_volume_log(device, current, increase=increase)
        case _:
            msg = f"unknown scale: {device.scale!r}"
            raise ConfigurationError(msg)


def next_mute_value(current: float) -> float:
    """
    Return the mute value to write given the current one.

    Muting only ever engages: an already muted channel stays muted.
    """
    if current == MUTE_OFF:
        return MUTE_ON
    if current == MUTE_ON:
        return MUTE_ON
    msg = f"unexpected current mute value: {current:f}"
    raise UnexpectedStateError(msg)
