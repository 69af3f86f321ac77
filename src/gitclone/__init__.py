"""gitclone

Clone git repositories from Python by driving the ``git`` executable,
either from a coroutine or as a blocking call.
"""

__version__ = '0.1.0'

from .config import Config, GitConfig
from .git import Git, CloneResult, CommandError, GitError, clone, clone_sync

__all__ = [
    'Config',
    'GitConfig',
    'Git',
    'CloneResult',
    'CommandError',
    'GitError',
    'clone',
    'clone_sync',
]
