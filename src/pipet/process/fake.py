"""In-memory fake implementation of ProcessLauncher for testing."""

from collections.abc import Sequence
from dataclasses import dataclass

from pipet.errors import SpawnError
from pipet.process.abc import ProcessLauncher
from pipet.process.types import ProcessResult


@dataclass(frozen=True)
class LaunchCall:
    """One recorded call to FakeProcessLauncher.launch()."""

    command: tuple[str, ...]
    hide: bool


class FakeProcessLauncher(ProcessLauncher):
    """In-memory fake that never starts a process.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.

    Examples:
        >>> launcher = FakeProcessLauncher(exit_code=3)
        >>> launcher.launch(["false"], hide=False).exit_code
        3

        >>> launcher = FakeProcessLauncher(spawn_error=FileNotFoundError("sh"))
        >>> launcher.launch(["anything"], hide=True)
        Traceback (most recent call last):
        ...
        pipet.errors.SpawnError: Failed to launch 'anything': sh
    """

    def __init__(
        self,
        *,
        exit_code: int = 0,
        stdout: bytes = b"",
        spawn_error: OSError | None = None,
    ) -> None:
        """Create FakeProcessLauncher with predetermined behavior.

        Args:
            exit_code: Exit code every launch reports
            stdout: Output reported as captured when launched with hide=True
            spawn_error: If set, every launch fails with SpawnError wrapping it
        """
        self._exit_code = exit_code
        self._stdout = stdout
        self._spawn_error = spawn_error
        self._launch_calls: list[LaunchCall] = []

    @property
    def launch_calls(self) -> list[LaunchCall]:
        """Read-only access to launch calls for test assertions."""
        return self._launch_calls.copy()

    def launch(self, command: Sequence[str], *, hide: bool) -> ProcessResult:
        """Record the call and return the configured outcome."""
        self._launch_calls.append(LaunchCall(command=tuple(command), hide=hide))

        if self._spawn_error is not None:
            raise SpawnError(
                f"Failed to launch '{command[0]}': {self._spawn_error}", self._spawn_error
            )

        captured = self._stdout if hide else b""
        return ProcessResult(exit_code=self._exit_code, stdout=captured)
