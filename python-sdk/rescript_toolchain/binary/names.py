"""
Executables shipped by a ReScript toolchain installation.
"""

from enum import Enum
from typing import Dict, Optional, Union


class BinaryName(str, Enum):
    """File name of a toolchain executable."""
    BSC = "bsc.exe"
    EDITOR_ANALYSIS = "rescript-editor-analysis.exe"
    TOOLS = "rescript-tools.exe"
    REWATCH = "rewatch.exe"
    RESCRIPT_NATIVE = "rescript.exe"
    RESCRIPT = "rescript"

    def __str__(self) -> str:
        return self.value

    @property
    def is_native(self) -> bool:
        """False only for the JavaScript wrapper script."""
        return self is not BinaryName.RESCRIPT

    @property
    def bin_paths_key(self) -> Optional[str]:
        """Key of this binary in a platform package's ``binPaths`` export."""
        return _BIN_PATHS_KEYS.get(self)

    @classmethod
    def coerce(cls, value: Union[str, "BinaryName"]) -> "BinaryName":
        """Accept either a member or its file name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(b.value for b in cls)
            raise ValueError(f"Unknown binary: {value!r}. Expected one of: {choices}") from None


_BIN_PATHS_KEYS: Dict[BinaryName, str] = {
    BinaryName.BSC: "bsc_exe",
    BinaryName.EDITOR_ANALYSIS: "rescript_editor_analysis_exe",
    BinaryName.TOOLS: "rescript_tools_exe",
    BinaryName.REWATCH: "rewatch_exe",
    BinaryName.RESCRIPT_NATIVE: "rescript_exe",
}
