"""Shared rich console for dir-usage-cli, plus raw result output."""
import os
import sys

from rich.console import Console
from rich.markup import escape


def make_console() -> Console:
    # Redirected output must stay plain: no ANSI, no wrapping of long paths.
    if sys.stdout.isatty():
        return Console(emoji=False, soft_wrap=True)
    return Console(no_color=True, highlight=False, emoji=False, soft_wrap=True)


console = make_console()


def write_raw(line):
    """Write one line to stdout untouched by rich.

    Undecodable file names (surrogate-escaped by os.scandir) go out as their
    original bytes when stdout has a binary buffer.
    """
    stream = sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(line + "\n")
        return
    stream.flush()
    buffer.write(os.fsencode(line) + b"\n")
    buffer.flush()


def printable(text):
    """Markup-escaped text with undecodable bytes shown as backslash escapes."""
    return escape(str(text).encode("utf-8", "backslashreplace").decode("utf-8"))
