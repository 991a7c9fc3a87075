"""Error types for the command-line and configuration layer.

Parsing itself never raises: malformed markup is kept as literal text.
"""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Raised when a config file cannot be read or holds an invalid value."""

    def __init__(self, message: str, path: Path, key: str | None = None) -> None:
        self.message = message
        self.path = path
        self.key = key
        super().__init__(self.format())

    def format(self) -> str:
        location = f"{self.path}"
        if self.key is not None:
            location += f" [{self.key}]"
        return f"error: {self.message}\n  --> {location}"
