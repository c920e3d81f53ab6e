"""Core type definitions"""

from enum import Enum
from typing import NamedTuple


class Platform(str, Enum):
    """Supported build agent platforms, named as ``sys.platform`` names them."""

    WINDOWS = "win32"
    LINUX = "linux"
    DARWIN = "darwin"

    def __str__(self) -> str:
        return self.value


class PlatformCommands(NamedTuple):
    """Platform-specific command templates."""

    shell: str
    script_name: str
    log: str
    step_log: str
    add_log: str
    suppress_output: str
    ini_append: str
    add_extension: str
    install_extension: str
    disable_xdebug: str
    disable_pcov: str
