# src/repoclip/cli.py
import os
import sys
import argparse
import shutil
from pathlib import Path
from typing import BinaryIO, List, Optional

# Module imports
from repoclip.config import VERSION
from repoclip.core.bundler import Bundler
from repoclip.core.classifier import MimeClassifier
from repoclip.core.clipboard import clipboard_candidates, select_sink, write_stdout
from repoclip.core.environment import Which, validate_environment
from repoclip.core.git import GitRepository
from repoclip.errors import RepoclipError
from repoclip.models import Options
from repoclip.utils.tokenizer import Tokenizer

COPY_FLAGS = ("-c", "--copy")
HELP_FLAGS = ("-h", "--help")
VERSION_FLAGS = ("--version",)
KNOWN_FLAGS = frozenset(COPY_FLAGS + HELP_FLAGS + VERSION_FLAGS)

def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="repoclip",
        description="Bundle every tracked text file of the current git repository into one blob, "
                    "printed to stdout or copied to the clipboard.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(*COPY_FLAGS, dest="copy", action="store_true", help="Copy the bundle to the clipboard instead of printing it")
    parser.add_argument(*HELP_FLAGS, action="help", help="Show this help message and exit")
    parser.add_argument(*VERSION_FLAGS, action="version", version=f"repoclip {VERSION}", help="Show the version and exit")
    return parser

def parse_options(argv: List[str]) -> Options:
    """
    Rejects the first unknown token before argparse sees anything, so
    `--bogus --help` fails while `--help --bogus` still prints help.
    Help and version exit from inside argparse, at their position in argv.
    """
    parser = create_arg_parser()

    for i, token in enumerate(argv):
        if token in HELP_FLAGS + VERSION_FLAGS:
            # Everything after a help/version flag is never looked at
            return Options(copy_to_clipboard=parser.parse_args(argv[:i + 1]).copy)
        if token not in KNOWN_FLAGS:
            print(f"Error: Unknown option: {token}", file=sys.stderr)
            parser.print_help(sys.stderr)
            sys.exit(1)

    args = parser.parse_args(argv)
    return Options(copy_to_clipboard=args.copy)

def run(
    options: Options,
    root: Path,
    which: Which = shutil.which,
    repository=None,
    classifier=None,
    candidates=None,
    stdout: Optional[BinaryIO] = None,
) -> None:
    """Validate, enumerate, bundle, dispatch. Nothing is written until the bundle is complete."""
    repository = repository or GitRepository(root)
    validate_environment(root, which, repository)

    paths = repository.tracked_files()
    bundle = Bundler(root, classifier or MimeClassifier(root)).build(paths)

    if bundle.is_empty:
        print("Warning: No text files found in tracked files.", file=sys.stderr)
        return

    data = bundle.data
    if options.copy_to_clipboard:
        if candidates is None:
            candidates = clipboard_candidates(which=which)
        sink = select_sink(candidates)
        sink.write(data)
        tokens = Tokenizer.count_bytes(data)
        print(f"Copied {len(bundle.blocks)} file(s) (~{tokens} tokens) to clipboard via {sink.name}.", file=sys.stderr)
    else:
        write_stdout(data, stdout)

def _silence_stdout():
    """Points stdout at devnull so the interpreter's final flush cannot raise again."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        # stdout has no file descriptor (e.g. captured); nothing left to flush to
        return

def main(argv: Optional[List[str]] = None):
    try:
        options = parse_options(sys.argv[1:] if argv is None else list(argv))
        run(options, Path.cwd())

    except RepoclipError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except BrokenPipeError:
        # Reader closed the pipe early (e.g. `repoclip | head`)
        _silence_stdout()
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
