"""Tests for FakeProcessLauncher implementation."""

import pytest

from pipet.errors import SpawnError
from pipet.process.fake import FakeProcessLauncher, LaunchCall


class TestFakeProcessLauncher:
    """Tests for the FakeProcessLauncher fake implementation."""

    def test_defaults_to_success(self) -> None:
        result = FakeProcessLauncher().launch(["true"], hide=False)

        assert result.exit_code == 0
        assert result.stdout == b""

    def test_reports_configured_exit_code(self) -> None:
        result = FakeProcessLauncher(exit_code=3).launch(["false"], hide=False)

        assert result.exit_code == 3

    def test_stdout_is_only_captured_when_hidden(self) -> None:
        launcher = FakeProcessLauncher(stdout=b"hello\n")

        assert launcher.launch(["echo"], hide=True).stdout == b"hello\n"
        assert launcher.launch(["echo"], hide=False).stdout == b""

    def test_spawn_error_wraps_cause(self) -> None:
        cause = PermissionError("Permission denied")
        launcher = FakeProcessLauncher(spawn_error=cause)

        with pytest.raises(SpawnError) as exc_info:
            launcher.launch(["./script.sh"], hide=False)

        assert exc_info.value.cause is cause
        assert "./script.sh" in str(exc_info.value)

    def test_records_calls_even_when_spawn_fails(self) -> None:
        launcher = FakeProcessLauncher(spawn_error=OSError("boom"))

        with pytest.raises(SpawnError):
            launcher.launch(["cmd", "arg"], hide=True)

        assert launcher.launch_calls == [LaunchCall(command=("cmd", "arg"), hide=True)]

    def test_launch_calls_returns_copy(self) -> None:
        launcher = FakeProcessLauncher()
        launcher.launch(["true"], hide=False)

        calls_copy = launcher.launch_calls
        calls_copy.clear()

        assert len(launcher.launch_calls) == 1
