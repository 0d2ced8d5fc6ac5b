"""Shared pytest fixtures for motu-volume tests."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from motu_volume.connection import MotuConnection
from motu_volume.controller import MotuController
from motu_volume.models import Device, Scale

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping


@pytest.fixture
def linear_device() -> Device:
    """Return a linear device shaped like the main outputs trim."""
    return Device(
        property="datastore/ext/obank/1/ch/0/stereoTrim",
        mute_property="datastore/mix/main/0/matrix/mute",
        scale=Scale.LINEAR,
        max=0,
        min=-50,
        zero_volume=-127,
    )


@pytest.fixture
def log_device() -> Device:
    """Return a logarithmic device shaped like a mixer channel fader."""
    return Device(
        property="datastore/mix/chan/10/matrix/fader",
        mute_property="datastore/mix/chan/10/matrix/mute",
        scale=Scale.LOGARITHMIC,
        max=0,
        min=-64,
        zero_volume=0,
    )


@pytest.fixture
def devices(linear_device: Device, log_device: Device) -> Mapping[str, Device]:
    """Return a device table with one device of each scale."""
    return MappingProxyType({"main": linear_device, "computer": log_device})


@pytest.fixture
def mock_connection() -> AsyncMock:
    """Create a mock MotuConnection."""
    conn = AsyncMock(spec=MotuConnection)
    conn.address = "http://192.168.88.251"
    conn.get = AsyncMock(return_value=0.0)
    conn.patch = AsyncMock()
    conn.close = AsyncMock()
    return conn


@pytest.fixture
def mock_play_sound() -> Generator[AsyncMock]:
    """Patch the confirmation sound so tests never spawn afplay."""
    with patch(
        "motu_volume.controller.play_sound", new_callable=AsyncMock
    ) as mock_play:
        yield mock_play


@pytest.fixture
def controller(
    mock_connection: AsyncMock,
    devices: Mapping[str, Device],
    mock_play_sound: AsyncMock,  # noqa: ARG001
) -> MotuController:
    """Create a MotuController wired to a mock connection."""
    return MotuController(mock_connection, devices, sound="/tmp/volume.aiff")  # noqa: S108


@pytest.fixture
def mock_process() -> MagicMock:
    """Create a mock asyncio subprocess that exits cleanly."""
    proc = MagicMock()
    proc.returncode = 0
    proc.communicate = AsyncMock(return_value=(b"", b""))
    return proc
