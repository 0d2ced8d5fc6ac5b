"""Shared pytest fixtures for integration tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from motu_volume.connection import MotuConnection
from tests.integration.simulator import (
    COMPUTER_FADER,
    COMPUTER_MUTE,
    MAIN_MUTE,
    MAIN_TRIM,
    MotuSimulator,
    motu_simulator,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


@pytest.fixture
async def simulator_fixture() -> AsyncGenerator[tuple[MotuSimulator, str, int]]:
    """Provide a simulator preloaded with the built-in device properties."""
    values = {
        MAIN_TRIM: -10.0,
        MAIN_MUTE: 0.0,
        COMPUTER_FADER: 1.0,
        COMPUTER_MUTE: 0.0,
    }
    async with motu_simulator(values=values) as (simulator, host, port):
        yield (simulator, host, port)


@pytest.fixture
async def connection_fixture(
    simulator_fixture: tuple[MotuSimulator, str, int],
) -> AsyncGenerator[MotuConnection]:
    """Provide a connection to the simulator with automatic cleanup."""
    _simulator, host, port = simulator_fixture
    async with MotuConnection(f"{host}:{port}", timeout=5) as connection:
        yield connection
