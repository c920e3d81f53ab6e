import os
from pathlib import Path
from typing import Mapping, Optional

import appdirs

from setup_php.commands import unsupported_platform
from setup_php.errors import ScriptNotFoundError, ScriptWriteError
from setup_php.inputs import get_input
from setup_php.logging import get_logger
from setup_php.platforms import is_platform_supported

logger = get_logger(__name__)

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"


def get_tool_cache_dir(inputs: Optional[Mapping[str, str]] = None) -> Path:
    """Runner tool cache, or the per-user cache dir outside of CI."""
    runner_dir = get_input("RUNNER_TOOL_CACHE", False, inputs)
    if runner_dir:
        return Path(runner_dir)
    return Path(appdirs.user_cache_dir("setup-php"))


def _read_text(path: Path) -> str:
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise ScriptNotFoundError(str(path)) from e


async def read_script(
    filename: str, version: str, platform: str, scripts_dir: Path = SCRIPTS_DIR
) -> str:
    """Read the setup script template for a platform.

    A version specific template at ``<platform>/<version><ext>`` takes
    precedence over ``filename``.
    """
    if not is_platform_supported(platform):
        return unsupported_platform(platform)

    scripts_dir = Path(scripts_dir)
    override = scripts_dir / str(platform) / f"{version}{Path(filename).suffix}"
    if override.is_file():
        logger.debug({"event": "script_override", "path": str(override)})
        return _read_text(override)

    return _read_text(scripts_dir / filename)


async def write_script(
    filename: str, content: str, inputs: Optional[Mapping[str, str]] = None
) -> Path:
    """Write an executable script to the tool cache and return its path."""
    script_path = (get_tool_cache_dir(inputs) / filename).resolve()

    try:
        script_path.parent.mkdir(parents=True, exist_ok=True)
        with open(script_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.chmod(script_path, 0o755)
    except OSError as e:
        raise ScriptWriteError(str(script_path), str(e)) from e

    logger.debug({"event": "script_written", "path": str(script_path)})
    return script_path
