"""
Controller for MOTU channel commands.

Each command is a single unsynchronised read-modify-write against the
device: read one property, compute the next value, write it back. Two
invocations racing (e.g. a held-down volume key) can both step from the same
stale read, so one step is lost. The datastore offers no compare-and-swap, so
this is accepted rather than worked around.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .const import COMMAND_MUTE, COMMANDS_DECREMENT, COMMANDS_INCREMENT, VOLUME_SOUND
from .errors import MotuVolumeError, UserInputError
from .sound import play_sound
from .volume import new_volume, next_mute_value

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .connection import MotuConnection
    from .models import Device

_LOGGER = logging.getLogger(__name__)


def _with_context(err: MotuVolumeError, context: str) -> MotuVolumeError:
    """Return an error of the same type with context prefixed to the message."""
    return type(err)(f"{context}: {err}")


class MotuController:
    """Run mute and volume step commands against a MOTU interface."""

    def __init__(
        self,
        connection: MotuConnection,
        devices: Mapping[str, Device],
        *,
        sound: str | None = VOLUME_SOUND,
    ) -> None:
        """
        Initialize the controller.

        Args:
            connection: datastore client used for the read and the write.
            devices: device table keyed by name.
            sound: file played after a gain change, or None for silence.

        """
        self.connection = connection
        self.devices = devices
        self.sound = sound

    def device(self, name: str) -> Device:
        """Return the device called name."""
        try:
            return self.devices[name]
        except KeyError:
            msg = f"Unknown device: {name}"
            raise UserInputError(msg) from None

    async def _read(self, prop: str) -> float:
        try:
            return await self.connection.get(prop)
        except MotuVolumeError as err:
            raise _with_context(err, "failed to get current value") from err

    async def _write(self, prop: str, value: float) -> None:
        try:
            await self.connection.patch(prop, value)
        except MotuVolumeError as err:
            raise _with_context(err, "failed to update property") from err

    async def mute(self, device: Device) -> float:
        """Engage mute on the device; returns the value written."""
        current = await self._read(device.mute_property)
        new_value = next_mute_value(current)
        await self._write(device.mute_property, new_value)
        _LOGGER.debug("Mute %s: %s -> %s", device.mute_property, current, new_value)
        return new_value

    async def inc_dec(self, device: Device, *, increase: bool) -> float:
        """Step the device's gain one step up or down; returns the value written."""
        current = await self._read(device.property)
        new_value = new_volume(device, current, increase=increase)
        await self._write(device.property, new_value)
        _LOGGER.debug(
            "%s %s: %f -> %f",
            "Increment" if increase else "Decrement",
            device.property,
            current,
            new_value,
        )

        # The write has already landed; a sound failure doesn't undo it
        if self.sound is not None:
            await play_sound(self.sound)
        return new_value

    async def run(self, device_name: str, command: str) -> float:
        """Resolve a device name and command keyword and execute it."""
        device = self.device(device_name)
        if command == COMMAND_MUTE:
            return await self.mute(device)
        if command in COMMANDS_INCREMENT:
            return await self.inc_dec(device, increase=True)
        if command in COMMANDS_DECREMENT:
            return await self.inc_dec(device, increase=False)
        msg = f"Unrecognised command: {command}"
        raise UserInputError(msg)
