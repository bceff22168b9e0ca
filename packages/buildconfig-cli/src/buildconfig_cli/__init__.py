"""buildconfig-cli: command line interface for buildconfig."""

from __future__ import annotations

__version__ = "0.1.0"
