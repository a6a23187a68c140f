# src/repoclip/core/git.py
import os
import subprocess
from pathlib import Path
from typing import List

from repoclip.config import GIT_COMMAND
from repoclip.errors import EnumerationError

class GitRepository:
    """Thin wrapper over the git queries the pipeline needs."""

    def __init__(self, root: Path, git: str = GIT_COMMAND):
        self.root = root
        self.git = git

    def _run(self, *args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [self.git, *args],
            cwd=self.root,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )

    def is_work_tree(self) -> bool:
        result = self._run("rev-parse", "--is-inside-work-tree")
        return result.returncode == 0 and result.stdout.strip() == b"true"

    def tracked_files(self) -> List[str]:
        """
        Returns tracked paths in the order git reports them.
        Output is NUL-delimited so names with spaces or newlines survive intact.
        """
        result = self._run("ls-files", "-z")
        if result.returncode != 0:
            detail = result.stderr.decode("utf-8", "replace").strip()
            raise EnumerationError(f"'git ls-files' failed: {detail or f'exit code {result.returncode}'}")

        return [os.fsdecode(raw) for raw in result.stdout.split(b"\0") if raw]
