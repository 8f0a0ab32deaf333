"""
Shared fixtures: fake ReScript projects and toolchain installs on disk.
"""

import json
import os
from pathlib import Path
from typing import Dict, Iterable, Optional

import pytest

BIN_JS_TEMPLATE = """\
// @ts-check
import * as path from "node:path";

export const binDir = path.join(import.meta.dirname, "bin");

export const binPaths = {{
{entries}
}};
"""

ALL_BIN_PATHS = {
    "bsc_exe": "bsc.exe",
    "ninja_exe": "ninja.exe",
    "rescript_exe": "rescript.exe",
    "rescript_editor_analysis_exe": "rescript-editor-analysis.exe",
    "rescript_tools_exe": "rescript-tools.exe",
    "rewatch_exe": "rewatch.exe",
}


def touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")
    return path


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))
    return path


def make_toolchain(
    root: Path,
    version: str,
    wrapper: str = "cli/rescript.js",
    create_wrapper: bool = True,
) -> Path:
    """Install a fake ``node_modules/rescript`` under ``root``."""
    toolchain = root / "node_modules" / "rescript"
    write_json(toolchain / "package.json", {
        "name": "rescript",
        "version": version,
        "bin": {"rescript": wrapper, "bsc": "cli/bsc.js"},
    })
    if create_wrapper:
        touch(toolchain / wrapper)
    return toolchain


def make_platform_package(
    root: Path,
    target: str,
    bin_paths: Optional[Dict[str, str]] = None,
    create: Optional[Iterable[str]] = None,
) -> Path:
    """Install a fake ``node_modules/@rescript/<target>`` with a bin.js."""
    bin_paths = ALL_BIN_PATHS if bin_paths is None else bin_paths
    package = root / "node_modules" / "@rescript" / target
    entries = "\n".join(
        f'  {key}: path.join(binDir, "{name}"),' for key, name in bin_paths.items()
    )
    package.mkdir(parents=True, exist_ok=True)
    (package / "bin.js").write_text(BIN_JS_TEMPLATE.format(entries=entries))
    for name in (bin_paths.values() if create is None else create):
        touch(package / "bin" / name)
    return package


def make_legacy_binaries(toolchain: Path, platform_dir: str, names: Iterable[str]) -> None:
    for name in names:
        touch(toolchain / platform_dir / name)


@pytest.fixture
def root(tmp_path) -> Path:
    """Resolved temp dir, so realpath() in the resolver matches expectations."""
    return Path(os.path.realpath(tmp_path))


@pytest.fixture
def project(root) -> Path:
    """A ReScript project nested a few levels under ``root``."""
    path = root / "packages" / "app"
    path.mkdir(parents=True)
    (path / "rescript.json").write_text("{}")
    return path
