"""Utility functions for schema-autofix."""

from .env import get_env_bool, get_env_int, get_env_str, load_env_file

__all__ = ["load_env_file", "get_env_str", "get_env_bool", "get_env_int"]
