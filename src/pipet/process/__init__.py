from pipet.process.abc import ProcessLauncher
from pipet.process.real import RealProcessLauncher
from pipet.process.types import ProcessResult

__all__ = ["ProcessLauncher", "ProcessResult", "RealProcessLauncher"]
