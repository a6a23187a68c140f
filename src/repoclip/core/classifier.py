# src/repoclip/core/classifier.py
import re
import subprocess
from pathlib import Path
from typing import Iterable

from repoclip.config import FILE_COMMAND, TEXT_MIME_PATTERNS
from repoclip.errors import ClassificationError

# `file` reports unreadable paths on stdout with exit code 0
MIME_TYPE_RE = re.compile(r"^[\w.+-]+/[\w.+-]+$")

def is_text_mime(mime_type: str, patterns: Iterable[str] = TEXT_MIME_PATTERNS) -> bool:
    """Coarse substring test; e.g. any type containing 'xml' counts as text."""
    return any(pattern in mime_type for pattern in patterns)

class MimeClassifier:
    """Asks the `file` utility for the MIME type of a path under `root`."""

    def __init__(self, root: Path, command: str = FILE_COMMAND):
        self.root = root
        self.command = command

    def mime_type(self, rel_path: str) -> str:
        result = subprocess.run(
            [self.command, "-b", "--mime-type", str(self.root / rel_path)],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
        if result.returncode != 0:
            detail = result.stderr.decode("utf-8", "replace").strip()
            raise ClassificationError(f"Could not classify '{rel_path}': {detail or f'exit code {result.returncode}'}")

        mime_type = result.stdout.decode("utf-8", "replace").strip()
        if not MIME_TYPE_RE.match(mime_type):
            raise ClassificationError(f"Could not classify '{rel_path}': {mime_type}")
        return mime_type
