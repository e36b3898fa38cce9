"""Custom exception hierarchy for orderwrap."""

from __future__ import annotations

from pathlib import Path


class OrderwrapError(Exception):
    """Base error for the orderwrap package."""


class ConfigError(OrderwrapError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path.name}: {self.message}")
