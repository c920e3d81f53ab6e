"""Tests for php.ini configuration lines."""

import pytest

from setup_php.config import add_ini_values


@pytest.mark.asyncio
async def test_add_ini_values_unix():
    for platform in ("linux", "darwin"):
        script = await add_ini_values("post_max_size=256M, short_open_tag=On", platform)
        assert script == (
            "\n"
            'step_log "Add php.ini values"\n'
            'echo "post_max_size=256M\nshort_open_tag=On" >> $ini_file\n'
            'add_log "$tick" "post_max_size=256M" "Added to php.ini"\n'
            'add_log "$tick" "short_open_tag=On" "Added to php.ini"'
        )


@pytest.mark.asyncio
async def test_add_ini_values_windows():
    script = await add_ini_values("date.timezone=UTC", "win32")
    assert script == (
        "\n"
        'Step-Log "Add php.ini values"\n'
        'Add-Content C:\\tools\\php\\php.ini "date.timezone=UTC"\n'
        'Add-Log "$tick" "date.timezone=UTC" "Added to php.ini"'
    )


@pytest.mark.asyncio
async def test_add_ini_values_no_step():
    script = await add_ini_values("pcov.enabled=1", "linux", True)
    assert script.startswith('\necho "pcov.enabled=1" >> $ini_file')


@pytest.mark.asyncio
async def test_add_ini_values_empty():
    assert await add_ini_values(" , ", "linux") == ""


@pytest.mark.asyncio
async def test_add_ini_values_unsupported_platform():
    script = await add_ini_values("a=1", "fedora")
    assert "Platform fedora is not supported" in script
