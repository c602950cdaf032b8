"""Dotenv file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from ..errors import ConfigurationError


class DotenvLoader:
    """Loads default settings from .env-style files."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Load key-value pairs from a .env file.

        Args:
            path: Path to .env file

        Returns:
            Dictionary of declared values, empty when the file does not exist

        Raises:
            ConfigurationError: If file cannot be read
        """
        if not path.exists():
            return {}

        values: Dict[str, str] = {}
        try:
            lines = path.read_text().splitlines()
        except OSError as exc:
            raise ConfigurationError.load_failed("configuration", str(path)) from exc

        for line in lines:
            stripped = DotenvLoader._strip_export(line.strip())
            if DotenvLoader._should_skip_line(stripped):
                continue
            key, value = DotenvLoader._parse_env_line(stripped)
            if key:
                values[key] = value
        return values

    @staticmethod
    def _strip_export(line: str) -> str:
        if line.startswith("export "):
            return line[len("export ") :].lstrip()
        return line

    @staticmethod
    def _should_skip_line(line: str) -> bool:
        """Check if line should be skipped."""
        return not line or line.startswith("#") or "=" not in line

    @staticmethod
    def _parse_env_line(line: str) -> tuple[str, str]:
        key, raw_value = line.split("=", 1)
        value = raw_value.strip().strip("'").strip('"')
        return key.strip(), value
