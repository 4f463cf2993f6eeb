"""External command execution.

Every call to the container runtime goes through a ``CommandRunner`` so
that the pipeline can be exercised with a fake runner in tests.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .exceptions import CommandNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of an external command."""

    args: list[str]
    exit_code: int
    output: str = ""


class CommandRunner:
    """Runs external commands, streaming or capturing their output."""

    def run(
        self,
        args: list[str],
        cwd: Optional[Union[str, Path]] = None,
        stream: bool = True,
    ) -> CommandResult:
        """Run a command and wait for it to exit.

        Args:
            args: Command and arguments
            cwd: Working directory for the process
            stream: Stream stdout/stderr to the terminal instead of capturing

        Returns:
            CommandResult with the exit code and any captured output

        Raises:
            CommandNotFoundError: If the command cannot be launched
        """
        logger.debug("Running command: %s", " ".join(args))
        try:
            if stream:
                process = subprocess.run(args, cwd=cwd)
                output = ""
            else:
                process = subprocess.run(
                    args,
                    cwd=cwd,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    text=True,
                    errors="replace",
                )
                output = process.stdout or ""
        except OSError as e:
            raise CommandNotFoundError(f"Failed to launch '{args[0]}': {e}") from e

        logger.debug("Command exited with %d", process.returncode)
        return CommandResult(args=list(args), exit_code=process.returncode, output=output)
