"""
Pure path helpers: normalisation, upward file search and monorepo root derivation.
"""

import os
import re
from typing import Optional

NODE_MODULES = "node_modules"

_MONOREPO_ROOT_RE = re.compile(r"^(.*?)[\\/]+node_modules[\\/]+")


def normalize_path(file_path: Optional[str]) -> Optional[str]:
    """os.path.normpath that passes None through."""
    return os.path.normpath(file_path) if file_path is not None else None


def find_file_path_from_project_root(
    directory: Optional[str],
    file_partial_path: str,
) -> Optional[str]:
    """
    Walk up from ``directory`` and return the first ``<dir>/<file_partial_path>`` that exists.

    Stops at the filesystem root, where dirname() is a fixed point.
    """
    if directory is None:
        return None

    current = normalize_path(directory)
    while True:
        file_path = os.path.join(current, file_partial_path)
        if os.path.exists(file_path):
            return normalize_path(file_path)

        # dirname("") is "" and normpath("") is ".", so compare normalised forms
        parent = normalize_path(os.path.dirname(current))
        if parent == current:
            return None
        current = parent


def get_monorepo_root_from_binary_path(binary_path: Optional[str]) -> Optional[str]:
    """
    Directory that owns the hoisted node_modules a binary was found in.

    ``/monorepo/node_modules/.bin/rescript`` gives ``/monorepo``. Used when the
    toolchain lives in the monorepo root while the project root (nearest
    rescript.json) is a subpackage.
    """
    if binary_path is None:
        return None
    match = _MONOREPO_ROOT_RE.match(binary_path)
    return normalize_path(match.group(1)) if match else None
