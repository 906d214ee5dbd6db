"""Abstract interface for launching the wrapped command."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from pipet.process.types import ProcessResult


class ProcessLauncher(ABC):
    """Runs one shell command to completion.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def launch(self, command: Sequence[str], *, hide: bool) -> ProcessResult:
        """Run command through the shell and wait for it to terminate.

        Standard input is always inherited from the parent process.

        Args:
            command: Executable followed by its arguments
            hide: When True, stdout and stderr are captured instead of inherited
                and never reach the parent's terminal

        Returns:
            ProcessResult with the exit code and any captured stdout

        Raises:
            SpawnError: If the shell could not be started or the child was
                terminated by a signal
        """
        ...
