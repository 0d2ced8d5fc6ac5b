"""Data models for motu-volume."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Scale(Enum):
    """
    How a device's stored value relates to what the MOTU UI displays.

    LINEAR devices store and display the same raw gain units.
    LOGARITHMIC devices store an amplitude ratio in [0, 1] but are displayed
    (and stepped) in decibels.
    """

    LINEAR = "linear"
    LOGARITHMIC = "log"

    def to_display(self, raw: float) -> float:
        """Convert a stored value to the displayed scale."""
        match self:
            case Scale.LINEAR:
                return raw
            case Scale.LOGARITHMIC:
                # https://en.wikipedia.org/wiki/Decibel
                # raw * raw overflows to inf where math.pow would raise
                power = raw * raw
                if power == 0:
                    return -math.inf
                return 10 * math.log10(power)

    def from_display(self, value: float) -> float:
        """Convert a displayed value back to what the device stores."""
        match self:
            case Scale.LINEAR:
                return value
            case Scale.LOGARITHMIC:
                return math.sqrt(math.pow(10, value / 10))


@dataclass(frozen=True)
class Device:
    """Static description of one controllable channel on the interface."""

    # The property that controls the gain of this channel
    property: str
    # 0.0 (unmuted) or 1.0 (muted)
    mute_property: str
    scale: Scale
    # Allowed range of displayed values; dB for log scale devices
    max: float
    min: float
    # Written once a decrease reaches min. For log scale devices this is an
    # amplitude ratio, not dB, and must be 0.
    zero_volume: float = 0.0
