"""Coverage driver setup for the generated scripts.

Supported drivers are ``xdebug``, ``pcov`` and ``none``; ``none`` turns
both off. PCOV only builds on PHP 7.1 and newer.
"""

from setup_php.commands import log, step_log, unsupported_platform
from setup_php.config import add_ini_values
from setup_php.extensions import add_extension
from setup_php.platforms import get_platform_commands
from setup_php.types import PlatformCommands

COVERAGE_DRIVERS = ("xdebug", "pcov", "none")

PCOV_MIN_VERSION = (7, 1)


def version_tuple(version: str) -> tuple[int, ...]:
    return tuple(int(part) for part in version.split(".") if part.isdigit())


async def add_coverage_xdebug(version: str, platform: str) -> str:
    script = await add_extension("xdebug", version, platform, True)
    script += "\n" + log("Xdebug enabled as coverage driver", platform, "success")
    return script


async def add_coverage_pcov(
    version: str, platform: str, commands: PlatformCommands
) -> str:
    if version_tuple(version) < PCOV_MIN_VERSION:
        return "\n" + log("PCOV requires PHP 7.1 or newer", platform, "warning")

    script = await add_extension("pcov", version, platform, True)
    script += await add_ini_values("pcov.enabled=1", platform, True)
    # xdebug overrides pcov when both are loaded
    script += "\n" + commands.disable_xdebug.format(version=version, suppress="")
    script += "\n" + log("PCOV enabled as coverage driver", platform, "success")
    return script


async def disable_coverage(
    version: str, platform: str, commands: PlatformCommands
) -> str:
    suppress = commands.suppress_output
    script = "\n" + commands.disable_xdebug.format(version=version, suppress=suppress)
    script += "\n" + commands.disable_pcov.format(version=version, suppress=suppress)
    script += "\n" + log("Disabled Xdebug and PCOV", platform, "success")
    return script


async def add_coverage(coverage_driver: str, version: str, platform: str) -> str:
    """Script lines that set up the requested coverage driver."""
    driver = coverage_driver.strip().lower()
    if driver not in COVERAGE_DRIVERS:
        return ""

    commands = get_platform_commands(platform)
    if commands is None:
        return unsupported_platform(platform)

    script = "\n" + step_log("Setup Coverage", platform)
    match driver:
        case "xdebug":
            script += await add_coverage_xdebug(version, platform)
        case "pcov":
            script += await add_coverage_pcov(version, platform, commands)
        case "none":
            script += await disable_coverage(version, platform, commands)
    return script
