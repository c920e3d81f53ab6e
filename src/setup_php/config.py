"""php.ini configuration lines for the generated scripts."""

from setup_php.commands import add_log, step_log, unsupported_platform
from setup_php.parsers import ini_array
from setup_php.platforms import get_platform_commands
from setup_php.utils.generic import async_for_each


async def add_ini_values(
    ini_values_csv: str, platform: str, no_step: bool = False
) -> str:
    """Append the directives to php.ini and log each of them."""
    commands = get_platform_commands(platform)
    if commands is None:
        return unsupported_platform(platform)

    ini_values = ini_array(ini_values_csv)
    if not ini_values:
        return ""

    script = "\n"
    if not no_step:
        script += step_log("Add php.ini values", platform) + "\n"
    script += commands.ini_append.format(lines="\n".join(ini_values))

    async def log_value(line: str) -> None:
        nonlocal script
        script += "\n" + add_log("$tick", line, "Added to php.ini", platform)

    await async_for_each(ini_values, log_value)
    return script
