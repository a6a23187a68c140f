# src/repoclip/core/bundler.py
from pathlib import Path
from typing import Iterable, List

from repoclip.core.classifier import is_text_mime
from repoclip.errors import FileReadError
from repoclip.models import Bundle, FileBlock

class Bundler:
    def __init__(self, root: Path, classifier):
        self.root = root
        self.classifier = classifier

    def _read_bytes(self, rel_path: str) -> bytes:
        try:
            return (self.root / rel_path).read_bytes()
        except OSError as e:
            raise FileReadError(f"Could not read '{rel_path}': {e}") from e

    def build(self, paths: Iterable[str]) -> Bundle:
        """
        Classifies each path in order and keeps the text-like ones.
        Tracked paths missing from the work tree (unstaged deletions) and
        non-text files leave no trace; the first classifier failure aborts the build.
        """
        blocks: List[FileBlock] = []
        for rel_path in paths:
            if not (self.root / rel_path).is_file():
                continue
            if not is_text_mime(self.classifier.mime_type(rel_path)):
                continue
            blocks.append(FileBlock(rel_path=rel_path, content=self._read_bytes(rel_path)))
        return Bundle(blocks=tuple(blocks))
