"""Disk and path helpers for dir-usage-cli: list, accumulate, format."""
import os

from ..core.constants import UNITS, DEFAULT_UNIT
from .console import console, printable, write_raw


def human_size(num):
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if abs(num) < 1024.0:
            return f"{num:3.1f} {unit}"
        num /= 1024.0
    return f"{num:.1f} PB"


def report_access_error(path, exc):
    """Default handler for entries that cannot be read during a walk."""
    console.print(f"[yellow]Error accessing file: {printable(exc)}[/]")


def list_entries(path):
    """Return the direct children of path as os.DirEntry objects.

    Order is whatever the OS returns. Raises OSError if path cannot be read.
    """
    with os.scandir(path) as it:
        return list(it)


def compute_size(path, on_error=None):
    """Total byte size of every non-directory entry under path.

    Symlinks are not followed; a link counts as its own lstat size. Entries
    that cannot be read are passed to on_error(path, exc) and count as 0.
    OSError from scanning path itself is raised to the caller.
    """
    on_error = on_error or report_access_error
    try:
        entries = list_entries(path)
    except NotADirectoryError:
        return os.lstat(path).st_size
    total = 0
    pending = [entries]
    while pending:
        for entry in pending.pop():
            try:
                if entry.is_dir(follow_symlinks=False):
                    pending.append(list_entries(entry.path))
                else:
                    total += entry.stat(follow_symlinks=False).st_size
            except OSError as exc:
                on_error(entry.path, exc)
    return total


def convert_size(size, unit):
    """Convert a byte count to unit (B, KB or MB), truncating.

    Unknown units print a warning and fall back to MB.
    """
    divisor = UNITS.get(unit)
    if divisor is None:
        console.print("[yellow]Invalid unit; using MB as default[/]")
        divisor = UNITS[DEFAULT_UNIT]
    return size // divisor


def format_line(name, value):
    return f"{value}\t{name}"


def print_directory_size(name, size, unit):
    """Print one '<value>\\t<name>' result line."""
    write_raw(format_line(name, convert_size(size, unit)))
