"""Child process execution."""

import asyncio
import subprocess
from dataclasses import dataclass
from typing import List, Sequence

from ..utils.logging import get_logger


@dataclass
class ProcessResult:
    """Outcome of a finished child process."""

    returncode: int
    stdout: str = ''
    stderr: str = ''

    @property
    def success(self) -> bool:
        """Whether the process exited with code 0."""
        return self.returncode == 0


def _decode(data) -> str:
    return data.decode('utf-8', errors='replace') if data else ''


class ProcessRunner:
    """Launches external commands and waits for them to exit."""

    def __init__(self):
        self.logger = get_logger('ProcessRunner')

    def run(self, command: str, args: Sequence[str], cwd: str) -> ProcessResult:
        """Run a command, blocking until it exits.

        Args:
            command: Executable to launch
            args: Arguments passed to the executable
            cwd: Working directory of the child process

        Returns:
            Process result carrying the exit code
        """
        cmd = [command, *args]
        self.logger.debug(f'Running command: {" ".join(cmd)} in {cwd}')

        completed = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=cwd,
        )

        return self._result(completed.returncode, completed.stdout, completed.stderr)

    async def run_async(
        self, command: str, args: Sequence[str], cwd: str
    ) -> ProcessResult:
        """Run a command, suspending the caller until it exits.

        Args:
            command: Executable to launch
            args: Arguments passed to the executable
            cwd: Working directory of the child process

        Returns:
            Process result carrying the exit code
        """
        cmd: List[str] = [command, *args]
        self.logger.debug(f'Running command: {" ".join(cmd)} in {cwd}')

        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=cwd,
        )

        stdout, stderr = await process.communicate()

        return self._result(process.returncode, stdout, stderr)

    def _result(self, returncode: int, stdout, stderr) -> ProcessResult:
        result = ProcessResult(
            returncode=returncode, stdout=_decode(stdout), stderr=_decode(stderr)
        )

        self.logger.debug(f'Command return code: {result.returncode}')
        if result.stdout:
            self.logger.debug(f'Command stdout: {result.stdout}')
        if result.stderr:
            self.logger.debug(f'Command stderr: {result.stderr}')

        return result
