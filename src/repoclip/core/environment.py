# src/repoclip/core/environment.py
import shutil
from pathlib import Path
from typing import Callable, Optional

from repoclip.config import FILE_COMMAND, GIT_COMMAND
from repoclip.core.git import GitRepository
from repoclip.errors import MissingDependencyError, NotARepositoryError

Which = Callable[[str], Optional[str]]

def validate_environment(
    root: Path,
    which: Which = shutil.which,
    repository: Optional[GitRepository] = None,
) -> None:
    """
    Checks, in order: git on PATH, file on PATH, root inside a git work tree.
    Raises on the first failed check. The work tree is only queried once git is known to exist.
    """
    if which(GIT_COMMAND) is None:
        raise MissingDependencyError(f"'{GIT_COMMAND}' is not installed or not on PATH.")

    if which(FILE_COMMAND) is None:
        raise MissingDependencyError(f"'{FILE_COMMAND}' is not installed or not on PATH.")

    repository = repository or GitRepository(root)
    if not repository.is_work_tree():
        raise NotARepositoryError(f"'{root}' is not inside a git working tree.")
