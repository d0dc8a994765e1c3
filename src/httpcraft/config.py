"""
Configuration management for httpcraft.

Loads shell settings from environment variables or a .env file.
"""

import os
from pathlib import Path
from dataclasses import dataclass

from dotenv import load_dotenv

# Check common locations for .env
env_locations = [
    Path.home() / ".httpcraft" / ".env",
    Path.home() / ".config" / "httpcraft" / ".env",
    Path.cwd() / ".env",
]
for env_path in env_locations:
    if env_path.exists():
        load_dotenv(env_path)
        break


@dataclass
class ShellConfig:
    """Interactive shell settings."""

    # Line that ends multiline body input
    body_terminator: str = "@@@"

    # Pygments theme for highlighted JSON and generated code
    syntax_theme: str = "monokai"

    # Logging
    log_level: str = "WARNING"
    log_dir: str | None = None

    @classmethod
    def from_env(cls) -> "ShellConfig":
        """Load configuration from environment variables."""
        return cls(
            body_terminator=os.getenv("HTTPCRAFT_BODY_TERMINATOR", "@@@"),
            syntax_theme=os.getenv("HTTPCRAFT_SYNTAX_THEME", "monokai"),
            log_level=os.getenv("HTTPCRAFT_LOG_LEVEL", "WARNING"),
            log_dir=os.getenv("HTTPCRAFT_LOG_DIR") or None,
        )


# Global config instance
_config: ShellConfig | None = None


def get_config() -> ShellConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ShellConfig.from_env()
    return _config


def set_config(config: ShellConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
