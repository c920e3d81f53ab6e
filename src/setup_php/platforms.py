"""Per-platform shell command templates."""

from typing import Dict, Optional

from setup_php.types import Platform, PlatformCommands

POSIX_LOG = 'echo "\\033[{code};1m{message}\\033[0m"'

PLATFORM_COMMANDS: Dict[Platform, PlatformCommands] = {
    Platform.WINDOWS: PlatformCommands(
        shell="pwsh",
        script_name="win32.ps1",
        log='printf "\\033[{code};1m{message} \\033[0m"',  # Trailing space before reset
        step_log='Step-Log "{message}"',
        add_log='Add-Log "{mark}" "{subject}" "{status}"',
        suppress_output=" >$null 2>&1",
        ini_append='Add-Content C:\\tools\\php\\php.ini "{lines}"',
        add_extension='Add-Extension {extension} "{install_command}" {prefix}',
        install_extension="Install-PhpExtension {package} -MinimumStability stable -Path C:\\tools\\php",
        disable_xdebug="if(php -m | findstr -i xdebug) {{ Disable-PhpExtension xdebug C:\\tools\\php{suppress} }}",
        disable_pcov="if(php -m | findstr -i pcov) {{ Disable-PhpExtension pcov C:\\tools\\php{suppress} }}",
    ),
    Platform.LINUX: PlatformCommands(
        shell="sh",
        script_name="linux.sh",
        log=POSIX_LOG,
        step_log='step_log "{message}"',
        add_log='add_log "{mark}" "{subject}" "{status}"',
        suppress_output=" >/dev/null 2>&1",
        ini_append='echo "{lines}" >> $ini_file',
        add_extension='add_extension {extension} "{install_command}" {prefix}',
        install_extension="sudo DEBIAN_FRONTEND=noninteractive apt-get install -y php{version}-{package}",
        disable_xdebug='sudo phpdismod -v {version} xdebug{suppress}\nsudo sed -i "/xdebug/d" $ini_file',
        disable_pcov='sudo phpdismod -v {version} pcov{suppress}\nsudo sed -i "/pcov/d" $ini_file',
    ),
    Platform.DARWIN: PlatformCommands(
        shell="sh",
        script_name="darwin.sh",
        log=POSIX_LOG,
        step_log='step_log "{message}"',
        add_log='add_log "{mark}" "{subject}" "{status}"',
        suppress_output=" >/dev/null 2>&1",
        ini_append='echo "{lines}" >> $ini_file',
        add_extension='add_extension {extension} "{install_command}" {prefix}',
        install_extension="sudo pecl install {package}",
        disable_xdebug="sudo sed -i '' \"/xdebug/d\" $ini_file{suppress}",
        disable_pcov="sudo sed -i '' \"/pcov/d\" $ini_file{suppress}",
    ),
}


def get_platform_commands(platform: str) -> Optional[PlatformCommands]:
    """Get command templates for a platform, or None if it is not supported."""
    try:
        return PLATFORM_COMMANDS.get(Platform(platform))
    except ValueError:
        return None


def is_platform_supported(platform: str) -> bool:
    """Check if a platform has command templates."""
    return get_platform_commands(platform) is not None
