"""
Readers for the two JSON documents the resolver consults.

- ``lib/bs/compiler-info.json``: written by the build into the project; optional.
- ``node_modules/rescript/package.json``: the installed toolchain's descriptor; required.
"""

import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

COMPILER_INFO_PARTIAL_PATH = os.path.join("lib", "bs", "compiler-info.json")
PACKAGE_JSON = "package.json"


@dataclass(frozen=True)
class CompilerInfo:
    """Result of reading compiler-info.json. Empty when the file is missing or unusable."""
    bsc_path: Optional[str] = None

    @property
    def found(self) -> bool:
        return bool(self.bsc_path)

    @classmethod
    def empty(cls) -> "CompilerInfo":
        return cls()

    @classmethod
    def from_json(cls, data: Any) -> "CompilerInfo":
        if not isinstance(data, dict):
            return cls.empty()
        bsc_path = data.get("bsc_path")
        if not isinstance(bsc_path, str) or not bsc_path:
            return cls.empty()
        return cls(bsc_path=bsc_path)


def read_compiler_info(project_root_path: str) -> CompilerInfo:
    """Read ``<project_root>/lib/bs/compiler-info.json``; never raises."""
    path = os.path.abspath(os.path.join(project_root_path, COMPILER_INFO_PARTIAL_PATH))
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return CompilerInfo.empty()
    return CompilerInfo.from_json(data)


@dataclass(frozen=True)
class ToolchainPackage:
    """The installed ``rescript`` package: where it lives, its version, its JS wrapper."""
    directory: str
    version: Optional[str] = None
    wrapper_path: Optional[str] = None

    @classmethod
    def from_json(cls, directory: str, data: Dict[str, Any]) -> "ToolchainPackage":
        """
        Build from parsed package.json.

        ``version`` is only needed for native binaries and ``bin.rescript`` only
        for the wrapper, so both may be absent here.

        Raises:
            ValueError: The document is not an object or has no ``bin``.
        """
        if not isinstance(data, dict):
            raise ValueError(f"{PACKAGE_JSON} in {directory} is not an object")

        bin_field = data.get("bin")
        if bin_field is None:
            raise ValueError(f"{PACKAGE_JSON} in {directory} has no bin")
        # npm allows "bin": "<path>" as shorthand for {"<name>": "<path>"}
        wrapper = bin_field.get("rescript") if isinstance(bin_field, dict) else bin_field
        if not isinstance(wrapper, str) or not wrapper:
            wrapper = None

        version = data.get("version")
        if not isinstance(version, str) or not version:
            version = None

        return cls(directory=directory, version=version, wrapper_path=wrapper)

    @property
    def wrapper_script(self) -> Optional[str]:
        """Location of the JS wrapper (not checked for existence), None without bin.rescript."""
        if self.wrapper_path is None:
            return None
        return os.path.join(self.directory, self.wrapper_path)


def read_toolchain_package(toolchain_dir: str) -> ToolchainPackage:
    """
    Read ``<toolchain_dir>/package.json``.

    Raises:
        OSError: The file cannot be read.
        ValueError: The file is not JSON or has no ``bin``.
    """
    with open(os.path.join(toolchain_dir, PACKAGE_JSON), encoding="utf-8") as f:
        data = json.load(f)
    return ToolchainPackage.from_json(toolchain_dir, data)
