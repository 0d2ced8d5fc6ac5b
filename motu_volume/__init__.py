"""Step the gain of MOTU mixer channels over the device's HTTP datastore."""

from __future__ import annotations

from .models import Device, Scale

__all__ = ["Device", "Scale"]
