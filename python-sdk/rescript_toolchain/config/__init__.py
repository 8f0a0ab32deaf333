"""
Configuration — env parsing and resolver settings.
"""

from dataclasses import dataclass, field
from typing import Optional

from .env_config import (
    get_platform_path_from_env,
    get_str_env,
    get_verbose_from_env,
    parse_bool_env,
)


@dataclass
class ResolverConfig:
    """
    Settings applied to every resolution issued through the CLI.

    Environment Variables:
        RESCRIPT_PLATFORM_PATH: Directory with the native binaries (skips discovery)
        RESCRIPT_TOOLCHAIN_VERBOSE: Log each resolution step (true/false)
    """
    platform_path: Optional[str] = None
    verbose: bool = field(default_factory=get_verbose_from_env)

    @classmethod
    def from_env(cls) -> "ResolverConfig":
        """Create config from environment variables."""
        return cls(platform_path=get_platform_path_from_env())

    def with_overrides(
        self,
        platform_path: Optional[str] = None,
        verbose: Optional[bool] = None,
    ) -> "ResolverConfig":
        """Create a new config with specified overrides."""
        return ResolverConfig(
            platform_path=platform_path if platform_path is not None else self.platform_path,
            verbose=verbose if verbose is not None else self.verbose,
        )


__all__ = [
    "ResolverConfig",
    "parse_bool_env", "get_str_env",
    "get_platform_path_from_env", "get_verbose_from_env",
]
