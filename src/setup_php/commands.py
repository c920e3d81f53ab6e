"""Shell command fragments for the generated setup scripts.

Every generator takes a platform identifier and returns the fragment in
that platform's shell dialect. An unknown platform is not an error here:
the generator returns an error-colored ``echo`` line saying the platform is
not supported, so the generated script shows the problem instead of the
job aborting.
"""

from setup_php.logging import get_logger
from setup_php.platforms import POSIX_LOG, get_platform_commands

logger = get_logger(__name__)

COLOR_CODES = {
    "error": "31",
    "success": "32",
    "warning": "33",
}


def color(type: str) -> str:
    """ANSI color code for a log type; anything unknown is a success."""
    return COLOR_CODES.get(type, COLOR_CODES["success"])


def unsupported_platform(platform: str) -> str:
    """Soft error line for a platform without command templates."""
    logger.debug({"event": "unsupported_platform", "platform": str(platform)})
    return POSIX_LOG.format(
        code=color("error"), message=f"Platform {platform} is not supported"
    )


def log(message: str, platform: str, type: str) -> str:
    """Colored log line, e.g. ``echo "\\033[33;1mmessage\\033[0m"``."""
    commands = get_platform_commands(platform)
    if commands is None:
        return unsupported_platform(platform)
    return commands.log.format(code=color(type), message=message)


def step_log(message: str, platform: str) -> str:
    commands = get_platform_commands(platform)
    if commands is None:
        return unsupported_platform(platform)
    return commands.step_log.format(message=message)


def add_log(mark: str, subject: str, status: str, platform: str) -> str:
    commands = get_platform_commands(platform)
    if commands is None:
        return unsupported_platform(platform)
    return commands.add_log.format(mark=mark, subject=subject, status=status)


def suppress_output(platform: str) -> str:
    """Redirection that discards both output streams of a command."""
    commands = get_platform_commands(platform)
    if commands is None:
        return unsupported_platform(platform)
    return commands.suppress_output


def script_name(platform: str) -> str:
    """Name of the setup script template for a platform."""
    commands = get_platform_commands(platform)
    if commands is None:
        return unsupported_platform(platform)
    return commands.script_name
