"""Extension setup lines for the generated scripts."""

from setup_php.commands import step_log, unsupported_platform
from setup_php.logging import get_logger
from setup_php.parsers import extension_array, get_extension_prefix
from setup_php.platforms import get_platform_commands
from setup_php.types import Platform
from setup_php.utils.generic import async_for_each

logger = get_logger(__name__)

# Stable pecl releases lag behind new PHP versions
PECL_PACKAGES = {
    ("7.4", "xdebug"): "xdebug-2.8.0beta2",
}


def package_name(extension: str, version: str, platform: str) -> str:
    """Name of the package that provides an extension on a platform."""
    match Platform(platform):
        case Platform.LINUX:
            return extension.replace("pdo_", "").replace("pdo-", "")
        case Platform.DARWIN:
            return PECL_PACKAGES.get((version, extension), extension)
        case _:
            return extension


async def add_extension(
    extension_csv: str, version: str, platform: str, no_step: bool = False
) -> str:
    """Script lines that enable, or install and enable, each extension."""
    commands = get_platform_commands(platform)
    if commands is None:
        return unsupported_platform(platform)

    extensions = extension_array(extension_csv)
    if not extensions:
        return ""

    script = "\n"
    if not no_step:
        script += step_log("Setup Extensions", platform)

    lines = []

    async def add(extension: str) -> None:
        extension = extension.lower()
        install_command = commands.install_extension.format(
            version=version, package=package_name(extension, version, platform)
        )
        lines.append(
            commands.add_extension.format(
                extension=extension,
                install_command=install_command + commands.suppress_output,
                prefix=get_extension_prefix(extension),
            )
        )
        logger.debug(
            {"event": "extension_added", "extension": extension, "platform": str(platform)}
        )

    await async_for_each(extensions, add)

    return script + "".join("\n" + line for line in lines)
