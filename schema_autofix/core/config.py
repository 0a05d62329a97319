"""Configuration for the autofix engine and its callers."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..utils.env import get_env_bool, get_env_int, get_env_str, load_env_file
from .exceptions import ConfigurationError

DEFAULT_BLOCK_KEYS: Tuple[str, ...] = ("formType",)


@dataclass
class AutofixConfig:
    """Configuration for repair output and logging."""

    indent: int = 2
    ensure_ascii: bool = False
    log_level: str = "WARNING"
    known_block_keys: Tuple[str, ...] = DEFAULT_BLOCK_KEYS
    min_gutter_lines: int = 20

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "AutofixConfig":
        """Create configuration from environment variables.

        A ``.env`` file is loaded first; variables already set in the process
        environment win over it.

        Environment variables:
            SCHEMA_AUTOFIX_INDENT: Spaces per level when re-serializing JSON
            SCHEMA_AUTOFIX_ENSURE_ASCII: Escape non-ASCII characters (true/false)
            SCHEMA_AUTOFIX_LOG_LEVEL: Logging level name for the CLI
            SCHEMA_AUTOFIX_BLOCK_KEYS: Comma-separated keys that get their own
                line after an opening brace in unrepaired output
        """
        load_env_file(env_file)

        block_keys = get_env_str("SCHEMA_AUTOFIX_BLOCK_KEYS")
        keys = (
            tuple(k.strip() for k in block_keys.split(",") if k.strip())
            if block_keys
            else DEFAULT_BLOCK_KEYS
        )

        return cls(
            indent=get_env_int("SCHEMA_AUTOFIX_INDENT", 2),
            ensure_ascii=get_env_bool("SCHEMA_AUTOFIX_ENSURE_ASCII", False),
            log_level=(get_env_str("SCHEMA_AUTOFIX_LOG_LEVEL", "WARNING") or "WARNING").upper(),
            known_block_keys=keys,
        )

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        if self.indent < 0:
            return False
        if self.min_gutter_lines < 1:
            return False
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            return False
        return all(isinstance(k, str) and k for k in self.known_block_keys)

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.is_valid():
            raise ConfigurationError(
                f"Invalid autofix configuration. "
                f"indent: {self.indent}, "
                f"log_level: {self.log_level}, "
                f"known_block_keys: {self.known_block_keys}"
            )


DEFAULT_CONFIG = AutofixConfig()
