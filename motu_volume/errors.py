"""Exceptions raised by motu-volume."""

from __future__ import annotations


class MotuVolumeError(Exception):
    """Base class for all motu-volume errors."""


class ConfigurationError(MotuVolumeError):
    """The static device table or config file is malformed."""


class UserInputError(MotuVolumeError):
    """Unknown device name or command, or missing arguments."""


class TransportError(MotuVolumeError):
    """A request to the device failed at the network or HTTP level."""


class DecodeError(MotuVolumeError):
    """The device answered with a payload that could not be understood."""


class UnexpectedStateError(MotuVolumeError):
    """The device reported a value outside its known domain."""


class SoundError(MotuVolumeError):
    """The confirmation sound could not be played."""
