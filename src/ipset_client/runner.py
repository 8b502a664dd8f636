"""Process execution for the ipset tool."""

import logging
import subprocess
from collections.abc import Sequence
from typing import Protocol

from ipset_client.exceptions import IpsetCommandError
from ipset_client.models import CommandResult

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Runs one external command to completion and captures its output."""

    def run(self, command: str, args: Sequence[str]) -> CommandResult:
        """Run ``command`` with ``args`` and return its captured streams."""
        ...


class SubprocessRunner:
    """Command runner backed by :func:`subprocess.run`.

    Each call gets its own pipes, so one runner may be shared between
    threads. There is no timeout: a hung tool blocks the caller.
    """

    def __init__(self, use_sudo: bool = False) -> None:
        """Initialize the runner.

        Args:
            use_sudo: Prefix every command with ``sudo -n``.
        """
        self.use_sudo = use_sudo

    def build_argv(self, command: str, args: Sequence[str]) -> list[str]:
        """Build the full argument vector for a command."""
        argv = [command, *args]
        if self.use_sudo:
            argv = ["sudo", "-n", *argv]
        return argv

    def run(self, command: str, args: Sequence[str]) -> CommandResult:
        """Run the command and capture stdout and stderr as text.

        Args:
            command: Executable name or path.
            args: Command arguments.

        Returns:
            Captured output.

        Raises:
            IpsetCommandError: If the executable cannot be started.
        """
        argv = self.build_argv(command, args)
        logger.debug("Running: %s", " ".join(argv))

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            msg = f"ipset command not found: {argv[0]}"
            raise IpsetCommandError(msg, command=argv) from e
        except PermissionError as e:
            msg = f"Permission denied running: {argv[0]}"
            raise IpsetCommandError(msg, command=argv) from e

        logger.debug("Exit status %d for: %s", completed.returncode, " ".join(argv))
        return CommandResult(
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            returncode=completed.returncode,
        )
