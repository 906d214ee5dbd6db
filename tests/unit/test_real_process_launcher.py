"""Tests for RealProcessLauncher that do not start a real process."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from pipet.errors import SpawnError
from pipet.process.real import RealProcessLauncher, build_shell_command


def test_build_shell_command_joins_tokens_unquoted() -> None:
    assert build_shell_command(["echo", "a b", "|", "wc", "-l"]) == "echo a b | wc -l"


def test_build_shell_command_single_token() -> None:
    assert build_shell_command(["ls -la | head"]) == "ls -la | head"


def _fake_process(returncode: int) -> MagicMock:
    """Build a Popen stand-in. Must be called before Popen is patched."""
    process = MagicMock(spec=subprocess.Popen)
    process.__enter__.return_value = process
    process.__exit__.return_value = False
    process.pid = 4242
    process.stdout = None
    process.stderr = None
    process.wait.return_value = returncode
    return process


def test_inherits_all_streams_when_not_hidden() -> None:
    process = _fake_process(0)
    with patch("pipet.process.real.subprocess.Popen", return_value=process) as mock_popen:

        result = RealProcessLauncher().launch(["echo", "test"], hide=False)

    assert result.exit_code == 0
    assert result.stdout == b""
    mock_popen.assert_called_once_with(
        "echo test",
        shell=True,
        stdin=None,
        stdout=None,
        stderr=None,
    )


def test_pipes_output_streams_when_hidden() -> None:
    process = _fake_process(0)
    with patch("pipet.process.real.subprocess.Popen", return_value=process) as mock_popen:

        RealProcessLauncher().launch(["echo", "test"], hide=True)

    mock_popen.assert_called_once_with(
        "echo test",
        shell=True,
        stdin=None,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )


def test_os_error_becomes_spawn_error() -> None:
    cause = PermissionError(13, "Permission denied")
    with patch("pipet.process.real.subprocess.Popen", side_effect=cause):
        with pytest.raises(SpawnError) as exc_info:
            RealProcessLauncher().launch(["./deploy.sh"], hide=False)

    assert exc_info.value.cause is cause
    assert "Failed to launch './deploy.sh'" in str(exc_info.value)
    assert "Permission denied" in str(exc_info.value)


def test_negative_returncode_becomes_spawn_error() -> None:
    process = _fake_process(-9)
    with patch("pipet.process.real.subprocess.Popen", return_value=process):

        with pytest.raises(SpawnError, match="terminated by SIGKILL") as exc_info:
            RealProcessLauncher().launch(["sleep", "100"], hide=False)

    assert exc_info.value.cause is None
