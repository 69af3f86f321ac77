"""Git command line wrapper."""

from .exceptions import GitError, CommandError
from .process import ProcessRunner, ProcessResult
from .wrapper import Git, CloneResult
from .clone import clone, clone_sync

__all__ = [
    'GitError',
    'CommandError',
    'ProcessRunner',
    'ProcessResult',
    'Git',
    'CloneResult',
    'clone',
    'clone_sync',
]
