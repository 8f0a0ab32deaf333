"""
Locate ReScript toolchain binaries for a project.

Search order (first definitive answer wins):
  1. explicit platform_path
  2. lib/bs/compiler-info.json written by the last build
  3. node_modules/rescript found upward from the project root, using the
     per-platform packages (>= 12.0.0-alpha.13) or the bundled platform
     directories (older releases)

Every failure is reported as None; callers decide what to tell the user.
"""

import asyncio
import os
from dataclasses import dataclass
from typing import Optional

import semver

from ..logger import get_logger
from .metadata import ToolchainPackage, read_compiler_info, read_toolchain_package
from .names import BinaryName
from .paths import NODE_MODULES, find_file_path_from_project_root, normalize_path
from .targets import HostPlatform, detect_host, load_bin_paths

logger = get_logger("rescript_toolchain.binary.finder")

TOOLCHAIN_PACKAGE = "rescript"
TOOLCHAIN_PARTIAL_PATH = os.path.join(NODE_MODULES, TOOLCHAIN_PACKAGE)

# First release that ships native binaries as @rescript/<os>-<arch> packages
PLATFORM_PACKAGES_VERSION = "12.0.0-alpha.13"


@dataclass(frozen=True)
class FindBinaryOptions:
    """A single resolution request."""
    project_root_path: Optional[str]
    binary: BinaryName
    platform_path: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "binary", BinaryName.coerce(self.binary))


def uses_platform_packages(version: str) -> bool:
    """
    True when ``version`` ships native binaries in per-platform packages.

    Raises:
        ValueError: ``version`` is not a semantic version.
    """
    return semver.Version.parse(version) >= semver.Version.parse(PLATFORM_PACKAGES_VERSION)


def _from_compiler_info(project_root_path: str, binary: BinaryName) -> Optional[str]:
    info = read_compiler_info(project_root_path)
    if not info.found:
        logger.debug("compiler-info.json unusable under %s, falling through", project_root_path)
        return None

    if binary is BinaryName.BSC:
        return normalize_path(info.bsc_path)
    if binary.is_native:
        # Native binaries of one installation sit next to bsc.exe
        return normalize_path(os.path.join(os.path.dirname(info.bsc_path), binary.value))

    logger.debug("compiler-info.json does not locate %s, falling through", binary.value)
    return None


def _from_platform_package(
    package: ToolchainPackage,
    binary: BinaryName,
    host: HostPlatform,
) -> Optional[str]:
    try:
        bin_paths = load_bin_paths(package.directory, host.target)
    except (OSError, ValueError, RuntimeError) as e:
        logger.debug("Cannot load platform package for %s: %s", host.target, e)
        return None

    binary_path = bin_paths.get(binary.bin_paths_key)
    if binary_path is None:
        logger.debug("Platform package %s has no %s", host.target, binary.bin_paths_key)
    return binary_path


def _from_legacy_layout(
    package: ToolchainPackage,
    binary: BinaryName,
    host: HostPlatform,
) -> str:
    # arm64 directories only exist in some releases; the plain one is the fallback
    candidates = [os.path.join(package.directory, d, binary.value) for d in host.legacy_dirs]
    for candidate in candidates[:-1]:
        if os.path.exists(candidate):
            return candidate
    return candidates[-1]


def _find_in_toolchain(
    project_root_path: Optional[str],
    binary: BinaryName,
    host: HostPlatform,
) -> Optional[str]:
    toolchain_dir = find_file_path_from_project_root(project_root_path, TOOLCHAIN_PARTIAL_PATH)
    if toolchain_dir is None:
        logger.debug("No %s above %s", TOOLCHAIN_PARTIAL_PATH, project_root_path)
        return None

    try:
        package = read_toolchain_package(toolchain_dir)
    except (OSError, ValueError) as e:
        logger.debug("Cannot read toolchain package.json in %s: %s", toolchain_dir, e)
        return None

    if binary is BinaryName.RESCRIPT:
        binary_path: Optional[str] = package.wrapper_script
    elif package.version is None:
        logger.debug("Toolchain package.json in %s has no version", toolchain_dir)
        return None
    else:
        try:
            modern = uses_platform_packages(package.version)
        except ValueError as e:
            logger.debug("Invalid toolchain version %r: %s", package.version, e)
            return None
        if modern:
            binary_path = _from_platform_package(package, binary, host)
        else:
            binary_path = _from_legacy_layout(package, binary, host)

    if binary_path is not None and os.path.exists(binary_path):
        return normalize_path(binary_path)

    logger.debug("%s not found in toolchain %s (v%s)", binary.value, toolchain_dir, package.version)
    return None


async def find_binary(
    options: FindBinaryOptions,
    *,
    host: Optional[HostPlatform] = None,
) -> Optional[str]:
    """
    Resolve the path of ``options.binary``.

    Args:
        options: Project root, binary and optional platform_path override.
        host: Platform to resolve for. Defaults to the running host.

    Returns:
        Normalised path, or None when nothing was found.
    """
    binary = options.binary

    if options.platform_path is not None:
        return normalize_path(os.path.join(options.platform_path, binary.value))

    if options.project_root_path is not None:
        from_info = await asyncio.to_thread(_from_compiler_info, options.project_root_path, binary)
        if from_info is not None:
            return from_info

    return await asyncio.to_thread(
        _find_in_toolchain,
        options.project_root_path,
        binary,
        host or detect_host(),
    )


def find_binary_sync(
    options: FindBinaryOptions,
    *,
    host: Optional[HostPlatform] = None,
) -> Optional[str]:
    """find_binary() for callers without a running event loop."""
    return asyncio.run(find_binary(options, host=host))

