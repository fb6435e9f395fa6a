"""Base Helm CLI client with async process execution."""

import asyncio
from dataclasses import dataclass

from loguru import logger

# Default settings
HELM_BIN = "helm"
HELM_TIMEOUT: float | None = None

NETWORK_ERROR_MARKERS = ("timeout", "network", "connection")


def set_helm_config(binary: str, timeout: float | None = None) -> None:
    """Set Helm binary and per-command timeout."""
    global HELM_BIN, HELM_TIMEOUT
    HELM_BIN = binary
    HELM_TIMEOUT = timeout


def is_network_failure(text: str) -> bool:
    """Check if Helm's diagnostic text describes a network condition."""
    lowered = text.lower()
    return any(marker in lowered for marker in NETWORK_ERROR_MARKERS)


@dataclass
class CommandResult:
    """Output of a successful Helm invocation."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


class HelmCommandError(Exception):
    """Helm exited non-zero or could not be executed.

    ``network`` is decided once here, from Helm's own diagnostic text, so
    callers branch on the flag instead of re-parsing messages.
    """

    def __init__(
        self,
        args: tuple[str, ...],
        message: str,
        returncode: int | None = None,
        stderr: str = "",
        network: bool | None = None,
    ):
        self.command = args
        self.returncode = returncode
        self.stderr = stderr
        self.message = message
        self.network = is_network_failure(message) if network is None else network
        super().__init__(self.message)


class BaseClient:
    """Runs Helm subcommands as child processes."""

    def __init__(self, binary: str | None = None, timeout: float | None = None):
        self._binary = binary or HELM_BIN
        self._timeout = timeout if timeout is not None else HELM_TIMEOUT
        logger.debug("{}: binary={}, timeout={}", self.__class__.__name__, self._binary, self._timeout)

    async def _run(self, *args: str) -> CommandResult:
        """Run ``helm <args>`` and return its decoded output."""
        command = " ".join(args)
        logger.debug("Running {} {}", self._binary, command)

        try:
            proc = await asyncio.create_subprocess_exec(
                self._binary,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise HelmCommandError(args, f"Failed to execute helm {args[0]}: {e}", network=False) from e

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self._timeout)
        except TimeoutError as e:
            proc.kill()
            await proc.wait()
            raise HelmCommandError(
                args, f"helm {command}: timeout after {self._timeout}s", network=True
            ) from e

        out = stdout.decode(errors="replace")
        err = stderr.decode(errors="replace")
        if proc.returncode != 0:
            logger.debug("helm {} exited {}: {}", command, proc.returncode, err.strip())
            raise HelmCommandError(args, err.strip(), returncode=proc.returncode, stderr=err)

        return CommandResult(args=args, returncode=proc.returncode, stdout=out, stderr=err)
