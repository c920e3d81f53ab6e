"""setup-php helpers package."""

from setup_php.types import Platform, PlatformCommands
from setup_php.inputs import SUPPORTED_VERSIONS, get_input, get_version
from setup_php.commands import (
    add_log,
    color,
    log,
    script_name,
    step_log,
    suppress_output,
)
from setup_php.parsers import extension_array, get_extension_prefix, ini_array
from setup_php.utils.fs import read_script, write_script
from setup_php.utils.generic import async_for_each
from setup_php.errors import (
    SetupPhpError,
    ScriptNotFoundError,
    ScriptWriteError,
    UnsupportedPlatformError,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "Platform",
    "PlatformCommands",
    "SUPPORTED_VERSIONS",

    # Inputs
    "get_input",
    "get_version",

    # Command fragments
    "color",
    "log",
    "step_log",
    "add_log",
    "suppress_output",
    "script_name",

    # Parsers
    "extension_array",
    "ini_array",
    "get_extension_prefix",

    # Scripts
    "read_script",
    "write_script",
    "async_for_each",

    # Error types
    "SetupPhpError",
    "ScriptNotFoundError",
    "ScriptWriteError",
    "UnsupportedPlatformError",
]
