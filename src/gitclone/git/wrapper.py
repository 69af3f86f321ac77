"""Programmatic access to the git command line."""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from ..config.config import Config, GitConfig
from ..utils.logging import get_logger, setup_logging_from_config
from ..utils.paths import ensure_directory, to_absolute_path
from .exceptions import CommandError
from .process import ProcessResult, ProcessRunner

GitOptions = Union[Config, GitConfig, Dict[str, Any], None]


@dataclass
class CloneResult:
    """Result of a git clone operation."""

    success: bool
    returncode: int
    destination_path: str
    command: List[str] = field(default_factory=list)
    stdout: str = ''
    stderr: str = ''


def _coerce_config(options: GitOptions) -> GitConfig:
    if options is None:
        return GitConfig()
    if isinstance(options, Config):
        return options.git
    if isinstance(options, GitConfig):
        return options
    return GitConfig(**options)


class Git:
    """Wraps the git executable, launched from a fixed working directory.

    Each instance holds one working directory. Relative destination paths
    are resolved against it and every git process is started inside it.
    """

    def __init__(
        self, config: GitOptions = None, runner: Optional[ProcessRunner] = None
    ):
        """Initialize the wrapper.

        Args:
            config: Git options, as a Config, a GitConfig or a plain dict
                such as ``{'cwd': '/srv/checkouts'}``
            runner: Process runner used to launch git
        """
        self.config = _coerce_config(config)
        self.runner = runner or ProcessRunner()
        self.executable = self.config.executable
        self.logger = get_logger('Git')

        # Process cwd is read only for a missing or relative cwd option
        cwd = self.config.cwd if self.config.cwd is not None else os.getcwd()
        self._cwd = to_absolute_path(cwd)

    @classmethod
    def from_config(
        cls, config: Config, runner: Optional[ProcessRunner] = None
    ) -> 'Git':
        """Create a wrapper from a loaded Config and apply its logging section.

        Args:
            config: Loaded configuration (see ``Config.load``)
            runner: Process runner used to launch git

        Returns:
            Configured wrapper
        """
        setup_logging_from_config(config.logging)
        return cls(config.git, runner=runner)

    @property
    def cwd(self) -> str:
        """Absolute working directory git is launched in."""
        return self._cwd

    def cd(self, directory) -> None:
        """Change the working directory.

        Args:
            directory: Directory to move to, relative paths resolve against
                the current working directory of this wrapper
        """
        self._cwd = to_absolute_path(directory, base=self._cwd)
        self.logger.debug(f'Working directory set to {self._cwd}')

    def build_clone_args(self, source_url, destination_path) -> List[str]:
        """Build the argument vector for ``git clone``.

        Args:
            source_url: URL of the repository to clone
            destination_path: Path to clone the repository to

        Returns:
            Arguments following the executable name
        """
        source_url, destination_path = self._prepare(source_url, destination_path)
        return self._clone_args(source_url, destination_path)

    async def clone(self, source_url, destination_path) -> CloneResult:
        """Clone a repository, suspending until git exits.

        Args:
            source_url: URL of the repository to clone
            destination_path: Path to clone the repository to

        Returns:
            Successful clone result

        Raises:
            CommandError: git exited with a non-zero code
        """
        source_url, destination_path = self._prepare(source_url, destination_path)
        ensure_directory(os.path.dirname(destination_path))
        args = self._clone_args(source_url, destination_path)

        self.logger.info(f'Cloning {source_url} into {destination_path}')
        result = await self.runner.run_async(self.executable, args, cwd=self._cwd)

        return self._finish(args, destination_path, result, check=True)

    def clone_sync(
        self, source_url, destination_path, check: bool = False
    ) -> CloneResult:
        """Clone a repository, blocking until git exits.

        A failed clone does not raise unless ``check`` is set. Inspect
        ``success`` and ``returncode`` on the result instead.

        Args:
            source_url: URL of the repository to clone
            destination_path: Path to clone the repository to
            check: Raise CommandError when git exits with a non-zero code

        Returns:
            Clone result
        """
        source_url, destination_path = self._prepare(source_url, destination_path)
        ensure_directory(os.path.dirname(destination_path))
        args = self._clone_args(source_url, destination_path)

        self.logger.info(f'Cloning {source_url} into {destination_path}')
        result = self.runner.run(self.executable, args, cwd=self._cwd)

        return self._finish(args, destination_path, result, check=check)

    def _prepare(self, source_url, destination_path) -> Tuple[str, str]:
        if not isinstance(source_url, str):
            source_url = str(source_url)
        if not isinstance(destination_path, str):
            destination_path = str(destination_path)

        return source_url, to_absolute_path(destination_path, base=self._cwd)

    def _clone_args(self, source_url: str, destination_path: str) -> List[str]:
        args = ['clone', source_url]

        # Cloning into the working directory itself needs no destination
        if destination_path and destination_path != self._cwd:
            args.append(destination_path)

        return args

    def _finish(
        self,
        args: List[str],
        destination_path: str,
        result: ProcessResult,
        check: bool,
    ) -> CloneResult:
        command = [self.executable, *args]

        if not result.success:
            if check:
                self.logger.error(
                    f'Git clone failed with return code {result.returncode}: '
                    f'{result.stderr or "Unknown error"}'
                )
                raise CommandError(result.returncode, command, result.stderr)

            self.logger.warning(
                f'Git clone failed with return code {result.returncode}: '
                f'{result.stderr or "Unknown error"}'
            )
        else:
            self.logger.info(f'Git clone completed successfully to {destination_path}')

        return CloneResult(
            success=result.success,
            returncode=result.returncode,
            destination_path=destination_path,
            command=command,
            stdout=result.stdout,
            stderr=result.stderr,
        )
