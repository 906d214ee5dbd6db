"""Application context with dependency injection."""

from dataclasses import dataclass

from pipet.process.abc import ProcessLauncher
from pipet.process.fake import FakeProcessLauncher
from pipet.process.real import RealProcessLauncher


@dataclass(frozen=True)
class PipetContext:
    """Immutable context holding the dependencies of one invocation.

    Created at the CLI entry point unless a test already provided one.
    """

    launcher: ProcessLauncher

    @classmethod
    def for_test(
        cls,
        *,
        exit_code: int = 0,
        stdout: bytes = b"",
        spawn_error: OSError | None = None,
    ) -> "PipetContext":
        """Create a context backed by FakeProcessLauncher.

        Args:
            exit_code: Exit code the fake command reports
            stdout: Output the fake command produces when hidden
            spawn_error: If set, launching fails with this error

        Returns:
            PipetContext with a fake launcher
        """
        return cls(
            launcher=FakeProcessLauncher(
                exit_code=exit_code,
                stdout=stdout,
                spawn_error=spawn_error,
            )
        )


def create_context() -> PipetContext:
    """Create the production context."""
    return PipetContext(launcher=RealProcessLauncher())
