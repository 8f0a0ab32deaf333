"""
Unified environment variable parsing for rescript-toolchain.

Single source of truth for reading RESCRIPT_* env vars.
Used by config.ResolverConfig, the logger and the CLI.
"""

import os
from typing import Optional

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off", "")


def _raw_env(key: str, legacy_key: Optional[str]) -> Optional[str]:
    value = os.environ.get(key)
    if value is None and legacy_key:
        value = os.environ.get(legacy_key)
    return value


def parse_bool_env(
    key: str,
    default: bool,
    legacy_key: Optional[str] = None,
) -> bool:
    """
    Read an on/off switch such as RESCRIPT_TOOLCHAIN_VERBOSE.

    Spellings other than true/false, 1/0, yes/no, on/off (any case) return
    ``default``.
    """
    value = _raw_env(key, legacy_key)
    if value is None:
        return default
    value = value.lower().strip()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def get_str_env(
    key: str,
    default: Optional[str] = None,
    legacy_key: Optional[str] = None,
) -> Optional[str]:
    """
    Read a string from environment variable. Empty values count as unset.

    Args:
        key: Primary environment variable name (e.g. RESCRIPT_PLATFORM_PATH)
        default: Default value if not set
        legacy_key: Optional legacy key to check if primary is not set

    Returns:
        The stripped value, or default
    """
    value = os.environ.get(key)
    if not value and legacy_key:
        value = os.environ.get(legacy_key)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_platform_path_from_env() -> Optional[str]:
    """Directory holding the native binaries. RESCRIPT_PLATFORM_PATH or RESCRIPT_BINARY_PATH."""
    return get_str_env("RESCRIPT_PLATFORM_PATH", None, "RESCRIPT_BINARY_PATH")


def get_verbose_from_env() -> bool:
    """Debug logging for resolution steps. RESCRIPT_TOOLCHAIN_VERBOSE."""
    return parse_bool_env("RESCRIPT_TOOLCHAIN_VERBOSE", False)
