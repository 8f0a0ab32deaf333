"""
Host platform detection and the per-platform binary packages.

From ReScript 12.0.0-alpha.13 the native binaries ship as separate npm packages
(``@rescript/<os>-<arch>``) installed next to ``rescript``. Each exposes a
``bin.js`` module whose ``binPaths`` export maps keys like ``bsc_exe`` to files
under the package. Older releases bundle them in ``rescript/<os>[arch]/``.

OS and architecture names follow Node.js (``process.platform``/``process.arch``)
because both package names and legacy directory names are derived from them.
"""

import os
import platform
import re
from dataclasses import dataclass
from typing import Dict, List

PACKAGE_SCOPE = "@rescript"
BIN_JS = "bin.js"

# platform.system() -> process.platform
SYSTEM_MAP = {
    "Darwin": "darwin",
    "Linux": "linux",
    "Windows": "win32",
}

# platform.machine() -> process.arch
MACHINE_MAP = {
    "x86_64": "x64",
    "AMD64": "x64",
    "amd64": "x64",
    "arm64": "arm64",
    "aarch64": "arm64",
    "ARM64": "arm64",
}

# Supported targets: "<os>-<arch>" -> npm package name
TARGET_PACKAGES = {
    "darwin-arm64": f"{PACKAGE_SCOPE}/darwin-arm64",
    "darwin-x64": f"{PACKAGE_SCOPE}/darwin-x64",
    "linux-arm64": f"{PACKAGE_SCOPE}/linux-arm64",
    "linux-x64": f"{PACKAGE_SCOPE}/linux-x64",
    "win32-x64": f"{PACKAGE_SCOPE}/win32-x64",
}

_BIN_DIR_RE = re.compile(
    r"""binDir\s*=\s*path\.join\(\s*import\.meta\.dirname\s*,\s*["']([^"']+)["']\s*\)"""
)
_BIN_PATHS_BLOCK_RE = re.compile(r"binPaths\s*=\s*\{(.*?)\}", re.DOTALL)
_BIN_PATHS_ENTRY_RE = re.compile(
    r"""(\w+)\s*:\s*path\.join\(\s*binDir\s*,\s*["']([^"']+)["']\s*\)"""
)


@dataclass(frozen=True)
class HostPlatform:
    """Operating system and CPU architecture in Node.js vocabulary."""
    os_name: str
    arch: str

    @property
    def target(self) -> str:
        return f"{self.os_name}-{self.arch}"

    @property
    def is_arm64(self) -> bool:
        return self.arch == "arm64"

    @property
    def legacy_dirs(self) -> List[str]:
        """Subdirectories of a pre-12 ``rescript`` package to search, in order."""
        dirs = [self.os_name]
        if self.is_arm64:
            dirs.insert(0, self.os_name + self.arch)
        return dirs


def detect_host() -> HostPlatform:
    system = platform.system()
    machine = platform.machine()
    return HostPlatform(
        os_name=SYSTEM_MAP.get(system, system.lower()),
        arch=MACHINE_MAP.get(machine, machine.lower()),
    )


def get_target_package_dir(toolchain_dir: str, target: str) -> str:
    """
    Directory of the platform package installed as a sibling of ``toolchain_dir``.

    Raises:
        RuntimeError: ``target`` has no published platform package.
    """
    if target not in TARGET_PACKAGES:
        raise RuntimeError(
            f"Unsupported platform: {target}. "
            f"Supported: {', '.join(sorted(TARGET_PACKAGES))}"
        )
    # Symlinked installs (pnpm) keep the sibling next to the real directory
    real_dir = os.path.realpath(toolchain_dir)
    package_dir = os.path.join(real_dir, "..", *TARGET_PACKAGES[target].split("/"))
    return os.path.normpath(package_dir)


def parse_bin_paths(source: str, package_dir: str) -> Dict[str, str]:
    """Read the ``binPaths`` export of a platform package's bin.js."""
    bin_dir_match = _BIN_DIR_RE.search(source)
    bin_dir = os.path.join(package_dir, bin_dir_match.group(1) if bin_dir_match else "bin")

    block = _BIN_PATHS_BLOCK_RE.search(source)
    if block is None:
        return {}
    return {
        key: os.path.join(bin_dir, file_name)
        for key, file_name in _BIN_PATHS_ENTRY_RE.findall(block.group(1))
    }


def load_bin_paths(toolchain_dir: str, target: str) -> Dict[str, str]:
    """
    Load ``binPaths`` from ``<toolchain_dir>/../@rescript/<target>/bin.js``.

    Raises:
        RuntimeError: Unsupported target.
        FileNotFoundError: The platform package is not installed.
        ValueError: bin.js exports no ``binPaths`` entries.
    """
    package_dir = get_target_package_dir(toolchain_dir, target)
    bin_js = os.path.join(package_dir, BIN_JS)
    with open(bin_js, encoding="utf-8") as f:
        source = f.read()

    bin_paths = parse_bin_paths(source, package_dir)
    if not bin_paths:
        raise ValueError(f"No binPaths found in {bin_js}")
    return bin_paths
