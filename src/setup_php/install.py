"""Build the setup script for this platform and run it."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Mapping, Optional

from setup_php.config import add_ini_values
from setup_php.coverage import add_coverage
from setup_php.errors import (
    ScriptRunError,
    SetupPhpError,
    UnsupportedPlatformError,
    log_error,
)
from setup_php.extensions import add_extension
from setup_php.inputs import get_input, get_version
from setup_php.logging import configure_logging, get_logger, log_with_data
from setup_php.platforms import get_platform_commands
from setup_php.types import Platform
from setup_php.utils.fs import read_script, write_script

logger = get_logger(__name__)


async def build(
    filename: str,
    version: str,
    platform: str,
    inputs: Optional[Mapping[str, str]] = None,
) -> Path:
    """Compose the setup script from its template and the action inputs."""
    extension_csv = get_input("extension-csv", False, inputs)
    ini_values_csv = get_input("ini-values-csv", False, inputs)
    coverage_driver = get_input("coverage", False, inputs)

    script = await read_script(filename, version, platform)
    if extension_csv:
        script += await add_extension(extension_csv, version, platform)
    if ini_values_csv:
        script += await add_ini_values(ini_values_csv, platform)
    if coverage_driver:
        script += await add_coverage(coverage_driver, version, platform)

    return await write_script(filename, script, inputs)


def execution_command(location: Path, version: str, platform: str) -> List[str]:
    """Command that runs a built setup script."""
    commands = get_platform_commands(platform)
    if commands is None:
        raise UnsupportedPlatformError(str(platform))

    if Platform(platform) == Platform.WINDOWS:
        return [commands.shell, str(location), "-version", version]
    return [commands.shell, str(location), version]


async def run(
    platform: Optional[str] = None,
    inputs: Optional[Mapping[str, str]] = None,
    build_only: bool = False,
) -> int:
    """Build and run the setup script, returning its exit code."""
    platform = platform or sys.platform
    commands = get_platform_commands(platform)
    filename = commands.script_name if commands else f"{platform}.sh"

    version = get_version(inputs)
    location = await build(filename, version, platform, inputs)
    log_with_data(logger, logging.INFO, "Setup script built", {
        "path": str(location),
        "version": version,
        "platform": str(platform),
    })

    if build_only:
        return 0

    cmd = execution_command(location, version, platform)
    logger.debug({"event": "script_exec", "cmd": cmd})

    try:
        process = await asyncio.create_subprocess_exec(*cmd)
    except OSError as e:
        raise ScriptRunError(cmd, str(e)) from e
    returncode = await process.wait()

    logger.debug({"event": "script_complete", "returncode": returncode})
    return returncode


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="setup-php",
        description="Set up PHP on a CI build agent",
    )
    parser.add_argument(
        "--platform",
        default=sys.platform,
        help="Target platform: win32, linux or darwin (default: this machine)",
    )
    parser.add_argument(
        "--build-only",
        action="store_true",
        help="Write the setup script to the tool cache without running it",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Console entry point."""
    args = parse_args(argv)
    configure_logging()

    try:
        returncode = asyncio.run(run(args.platform, build_only=args.build_only))
    except SetupPhpError as e:
        log_error(e, context={"platform": args.platform}, logger=logger)
        returncode = 1

    sys.exit(returncode)
