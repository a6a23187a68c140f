# src/repoclip/config.py

VERSION = "1.0.0"

# A tracked file is bundled when its MIME type contains any of these.
TEXT_MIME_PATTERNS = (
    "text/",
    "json",
    "xml",
    "javascript",
    "x-sh",
    "x-ruby",
)

HEADER_TEMPLATE = "--- FILE: ./{path} ---\n"
BLOCK_SEPARATOR = b"\n\n"

GIT_COMMAND = "git"
FILE_COMMAND = "file"

# Clipboard programs, in probe order.
MACOS_CLIPBOARD = ["pbcopy"]
X11_CLIPBOARD = ["xclip", "-selection", "clipboard"]
WAYLAND_CLIPBOARD = ["wl-copy"]

CLIPBOARD_HINT = (
    "No clipboard utility found. "
    "Install xclip (X11) or wl-clipboard (Wayland), or run without --copy."
)
