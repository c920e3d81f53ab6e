"""Tests for script files and the sequential iterator."""

import asyncio
import os
import sys

import pytest

from setup_php.errors import ScriptNotFoundError, ScriptWriteError
from setup_php.utils.fs import SCRIPTS_DIR, get_tool_cache_dir, read_script, write_script
from setup_php.utils.generic import async_for_each


def read(path):
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


@pytest.mark.asyncio
async def test_async_for_each():
    concat = ""

    async def append(item):
        nonlocal concat
        concat += item

    await async_for_each(["a", "b", "c"], append)
    assert concat == "abc"


@pytest.mark.asyncio
async def test_async_for_each_does_not_interleave():
    """Test each action completes before the next starts"""
    events = []

    async def work(item):
        events.append(f"start-{item}")
        await asyncio.sleep(0.01 if item == "a" else 0)
        events.append(f"end-{item}")

    await async_for_each(["a", "b"], work)
    assert events == ["start-a", "end-a", "start-b", "end-b"]


@pytest.mark.asyncio
async def test_read_script():
    """Test version specific templates replace the platform template"""
    rc = read(SCRIPTS_DIR / "darwin" / "7.4.sh")
    darwin = read(SCRIPTS_DIR / "darwin.sh")
    linux = read(SCRIPTS_DIR / "linux.sh")
    win32 = read(SCRIPTS_DIR / "win32.ps1")

    assert await read_script("darwin.sh", "7.4", "darwin") == rc
    assert await read_script("darwin.sh", "7.3", "darwin") == darwin
    assert await read_script("linux.sh", "7.4", "linux") == linux
    assert await read_script("linux.sh", "7.3", "linux") == linux
    assert await read_script("win32.ps1", "7.4", "win32") == win32
    assert await read_script("win32.ps1", "7.3", "win32") == win32
    assert "Platform fedora is not supported" in await read_script(
        "fedora.sh", "7.3", "fedora"
    )


@pytest.mark.asyncio
async def test_read_script_override_matches_extension(tmp_path):
    (tmp_path / "linux.sh").write_text("generic")
    (tmp_path / "linux").mkdir()
    (tmp_path / "linux" / "7.2.sh").write_text("seven two")
    (tmp_path / "linux" / "7.3.ps1").write_text("wrong dialect")

    assert await read_script("linux.sh", "7.2", "linux", tmp_path) == "seven two"
    assert await read_script("linux.sh", "7.3", "linux", tmp_path) == "generic"


@pytest.mark.asyncio
async def test_read_script_missing(tmp_path):
    with pytest.raises(ScriptNotFoundError) as exc_info:
        await read_script("linux.sh", "7.4", "linux", tmp_path)

    assert isinstance(exc_info.value, FileNotFoundError)
    assert exc_info.value.details["path"] == str(tmp_path / "linux.sh")


@pytest.mark.asyncio
async def test_write_script(inputs, tmp_path):
    """Test scripts are written byte for byte and made executable"""
    content = "sudo apt-get install php\r\nphp -v\n"
    script_path = await write_script("test.sh", content, inputs)

    assert script_path == (tmp_path / "test.sh").resolve()
    assert script_path.read_bytes() == content.encode()
    if sys.platform != "win32":
        assert os.stat(script_path).st_mode & 0o777 == 0o755


@pytest.mark.asyncio
async def test_write_script_overwrites(inputs):
    await write_script("test.sh", "first", inputs)
    script_path = await write_script("test.sh", "second", inputs)
    assert read(script_path) == "second"


@pytest.mark.asyncio
async def test_write_script_failure(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")

    with pytest.raises(ScriptWriteError) as exc_info:
        await write_script("test.sh", "echo", {"RUNNER_TOOL_CACHE": str(blocker)})

    assert isinstance(exc_info.value.__cause__, OSError)


def test_tool_cache_dir_falls_back_to_user_cache(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "setup_php.utils.fs.appdirs.user_cache_dir", lambda name: str(tmp_path / name)
    )
    assert get_tool_cache_dir({}) == tmp_path / "setup-php"
    assert get_tool_cache_dir({"INPUT_RUNNER_TOOL_CACHE": "/opt/cache"}).as_posix() == "/opt/cache"
