"""Launch the wrapped command with subprocess."""

import logging
import signal
import subprocess
import threading
from collections.abc import Sequence
from functools import partial
from typing import IO

from pipet.errors import SpawnError
from pipet.process.abc import ProcessLauncher
from pipet.process.types import ProcessResult

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def build_shell_command(command: Sequence[str]) -> str:
    """Join command tokens into the line the shell will interpret.

    Tokens are joined with single spaces and not quoted, so pipes, globs and
    redirections in them behave exactly as if typed at a prompt.
    """
    return " ".join(command)


def _drain(stream: IO[bytes], sink: list[bytes] | None) -> None:
    for chunk in iter(partial(stream.read, CHUNK_SIZE), b""):
        if sink is not None:
            sink.append(chunk)


class RealProcessLauncher(ProcessLauncher):
    """Production implementation using subprocess.Popen with shell=True."""

    def launch(self, command: Sequence[str], *, hide: bool) -> ProcessResult:
        """Run command through the platform shell.

        Implementation details:
        - stdin is inherited in every mode
        - hide=False: stdout/stderr are inherited, nothing is buffered
        - hide=True: both are piped; stdout is accumulated on this thread
          while a daemon thread drains and discards stderr so neither pipe
          can fill up and block the child
        """
        shell_command = build_shell_command(command)
        stream = subprocess.PIPE if hide else None
        logger.debug("Launching: %r (hide=%s)", shell_command, hide)

        try:
            process = subprocess.Popen(
                shell_command,
                shell=True,
                stdin=None,
                stdout=stream,
                stderr=stream,
            )
        except OSError as e:
            raise SpawnError(f"Failed to launch '{command[0]}': {e}", e) from e

        logger.debug("Started pid=%d", process.pid)
        output: list[bytes] = []
        with process:
            stderr_thread: threading.Thread | None = None
            if process.stderr is not None:
                stderr_thread = threading.Thread(
                    target=_drain, args=(process.stderr, None), daemon=True
                )
                stderr_thread.start()

            if process.stdout is not None:
                _drain(process.stdout, output)

            returncode = process.wait()

            if stderr_thread is not None:
                stderr_thread.join()

        logger.debug("pid=%d exited with returncode=%d", process.pid, returncode)

        if returncode < 0:
            raise SpawnError(
                f"Command '{command[0]}' was terminated by {_signal_name(-returncode)}"
            )

        return ProcessResult(exit_code=returncode, stdout=b"".join(output))


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"
