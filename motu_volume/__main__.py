"""Allow running as python -m motu_volume."""

from .cli import run

run()
