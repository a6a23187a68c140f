# src/repoclip/core/clipboard.py
import platform
import shutil
import subprocess
import sys
from typing import BinaryIO, Callable, List, Optional, Sequence, Tuple

from repoclip.config import CLIPBOARD_HINT, MACOS_CLIPBOARD, WAYLAND_CLIPBOARD, X11_CLIPBOARD
from repoclip.errors import ClipboardError, MissingDependencyError

class ClipboardSink:
    """Pipes the bundle into an external clipboard program on its stdin."""

    def __init__(self, command: Sequence[str]):
        self.command = list(command)

    @property
    def name(self) -> str:
        return self.command[0]

    def write(self, data: bytes) -> None:
        try:
            result = subprocess.run(self.command, input=data, stderr=subprocess.PIPE)
        except OSError as e:
            raise ClipboardError(f"Could not run '{self.name}': {e}") from e

        if result.returncode != 0:
            detail = result.stderr.decode("utf-8", "replace").strip()
            raise ClipboardError(f"'{self.name}' failed: {detail or f'exit code {result.returncode}'}")

def write_stdout(data: bytes, stream: Optional[BinaryIO] = None) -> None:
    """Writes the bundle verbatim; no newline is appended."""
    stream = stream or sys.stdout.buffer
    stream.write(data)
    stream.flush()

Probe = Callable[[], bool]

def clipboard_candidates(
    system: Callable[[], str] = platform.system,
    which: Callable[[str], Optional[str]] = shutil.which,
) -> List[Tuple[Probe, ClipboardSink]]:
    """Probe order: macOS native, then X11, then Wayland."""
    return [
        (lambda: system() == "Darwin", ClipboardSink(MACOS_CLIPBOARD)),
        (lambda: which(X11_CLIPBOARD[0]) is not None, ClipboardSink(X11_CLIPBOARD)),
        (lambda: which(WAYLAND_CLIPBOARD[0]) is not None, ClipboardSink(WAYLAND_CLIPBOARD)),
    ]

def select_sink(candidates: Sequence[Tuple[Probe, ClipboardSink]]) -> ClipboardSink:
    for probe, sink in candidates:
        if probe():
            return sink
    raise MissingDependencyError(CLIPBOARD_HINT)
