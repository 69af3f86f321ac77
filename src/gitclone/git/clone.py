"""One-shot clone functions."""

from typing import Optional

from ..config.config import Config
from .process import ProcessRunner
from .wrapper import CloneResult, Git, GitOptions


def _make_git(options: GitOptions, runner: Optional[ProcessRunner]) -> Git:
    # A full Config also carries the logging section
    if isinstance(options, Config):
        return Git.from_config(options, runner=runner)
    return Git(options, runner=runner)


async def clone(
    source_url,
    destination_path,
    options: GitOptions = None,
    runner: Optional[ProcessRunner] = None,
) -> CloneResult:
    """Clone a repository with a fresh Git wrapper.

    Args:
        source_url: URL of the repository to clone
        destination_path: Path to clone the repository to
        options: Git options, e.g. ``{'cwd': ...}``, or a loaded Config
        runner: Process runner used to launch git

    Raises:
        CommandError: git exited with a non-zero code
    """
    return await _make_git(options, runner).clone(source_url, destination_path)


def clone_sync(
    source_url,
    destination_path,
    options: GitOptions = None,
    check: bool = False,
    runner: Optional[ProcessRunner] = None,
) -> CloneResult:
    """Blocking variant of :func:`clone`; see :meth:`Git.clone_sync`."""
    return _make_git(options, runner).clone_sync(
        source_url, destination_path, check=check
    )
