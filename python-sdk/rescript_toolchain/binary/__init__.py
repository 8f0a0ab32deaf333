"""
Binary resolution for ReScript toolchains.
"""

from .finder import (
    PLATFORM_PACKAGES_VERSION,
    FindBinaryOptions,
    find_binary,
    find_binary_sync,
    uses_platform_packages,
)
from .names import BinaryName
from .paths import (
    find_file_path_from_project_root,
    get_monorepo_root_from_binary_path,
    normalize_path,
)
from .targets import TARGET_PACKAGES, HostPlatform, detect_host

__all__ = [
    "BinaryName",
    "FindBinaryOptions",
    "HostPlatform",
    "PLATFORM_PACKAGES_VERSION",
    "TARGET_PACKAGES",
    "detect_host",
    "find_binary",
    "find_binary_sync",
    "find_file_path_from_project_root",
    "get_monorepo_root_from_binary_path",
    "normalize_path",
    "uses_platform_packages",
]
