"""
rescript-toolchain - locate the binaries of an installed ReScript compiler.

Finds bsc.exe, the editor analysis binary, rewatch and friends for a project,
across the toolchain layouts used by past and current releases.
"""

from .binary import (
    BinaryName,
    FindBinaryOptions,
    HostPlatform,
    detect_host,
    find_binary,
    find_binary_sync,
    find_file_path_from_project_root,
    get_monorepo_root_from_binary_path,
    normalize_path,
)
from .config import ResolverConfig
from .logger import get_logger, set_verbose

__version__ = "0.1.0"
__all__ = [
    # Resolution
    "BinaryName",
    "FindBinaryOptions",
    "find_binary",
    "find_binary_sync",
    # Paths
    "find_file_path_from_project_root",
    "get_monorepo_root_from_binary_path",
    "normalize_path",
    # Platform
    "HostPlatform",
    "detect_host",
    # Config & logging
    "ResolverConfig",
    "get_logger",
    "set_verbose",
]
