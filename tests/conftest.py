"""Shared test fixtures."""

import shutil
import subprocess
from typing import List, Sequence

import pytest

from gitclone.git.process import ProcessResult, ProcessRunner


class FakeRunner(ProcessRunner):
    """Process runner that records invocations instead of launching them."""

    def __init__(self, returncode: int = 0, stderr: str = ''):
        super().__init__()
        self.returncode = returncode
        self.stderr = stderr
        self.calls: List[dict] = []

    def run(self, command: str, args: Sequence[str], cwd: str) -> ProcessResult:
        self.calls.append({'command': command, 'args': list(args), 'cwd': cwd})
        return ProcessResult(returncode=self.returncode, stderr=self.stderr)

    async def run_async(
        self, command: str, args: Sequence[str], cwd: str
    ) -> ProcessResult:
        return self.run(command, args, cwd)


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def failing_runner():
    return FakeRunner(returncode=128, stderr="fatal: repository 'nope' not found")


requires_git = pytest.mark.skipif(
    shutil.which('git') is None, reason='git executable not available'
)


@pytest.fixture
def bare_repository(tmp_path):
    """Create an empty bare repository to clone from."""
    path = tmp_path / 'origin.git'
    subprocess.run(
        ['git', 'init', '--bare', '--quiet', str(path)],
        check=True,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
    return path
