# src/repoclip/models.py
from dataclasses import dataclass
from typing import Tuple

from repoclip.config import BLOCK_SEPARATOR, HEADER_TEMPLATE

@dataclass(frozen=True)
class Options:
    """Invocation options parsed from the command line."""
    copy_to_clipboard: bool = False

@dataclass(frozen=True)
class FileBlock:
    """One included file: its path relative to the repository root and raw bytes."""
    rel_path: str
    content: bytes

    def render(self) -> bytes:
        header = HEADER_TEMPLATE.format(path=self.rel_path)
        return header.encode("utf-8", "surrogateescape") + self.content + BLOCK_SEPARATOR

@dataclass(frozen=True)
class Bundle:
    blocks: Tuple[FileBlock, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    @property
    def data(self) -> bytes:
        return b"".join(block.render() for block in self.blocks)

    @property
    def paths(self) -> Tuple[str, ...]:
        return tuple(block.rel_path for block in self.blocks)
