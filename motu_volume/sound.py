"""Confirmation sound played after a gain change."""

from __future__ import annotations

import asyncio
import logging

from .const import SOUND_PLAYER, VOLUME_SOUND
from .errors import SoundError

_LOGGER = logging.getLogger(__name__)


async def play_sound(path: str = VOLUME_SOUND, *, player: str = SOUND_PLAYER) -> None:
    """Play a sound file with the system player and wait for it to finish."""
    _LOGGER.debug("Playing %s with %s", path, player)
    try:
        proc = await asyncio.create_subprocess_exec(
            player,
            path,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as err:
        msg = f"failed to run {player}: {err}"
        raise SoundError(msg) from err

    _, stderr = await proc.communicate()
    if proc.returncode != 0:
        msg = (
            f"failed to run {player}: exit status {proc.returncode}"
            f" ({stderr.decode(errors='replace').strip()})"
        )
        raise SoundError(msg)
