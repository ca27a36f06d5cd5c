#!/usr/bin/env python3
"""Scan logic: size every immediate subdirectory of a root and print it."""
import os
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from ..utils.console import console, printable
from ..utils.disk import list_entries, compute_size, print_directory_size


@dataclass
class ScanReport:
    """Outcome of one scan: printed (name, bytes) pairs and failed (path, message) pairs."""

    printed: List[Tuple[str, int]] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)


def subdirectories(entries, exclude: Iterable[str] = ()):
    """Yield the directory entries, skipping names in exclude. Symlinked dirs are not followed."""
    skip = set(exclude)
    for entry in entries:
        if not entry.is_dir(follow_symlinks=False):
            continue
        if entry.name in skip:
            continue
        yield entry


def scan(root: str, unit: str, exclude: Iterable[str] = (), on_error=None) -> ScanReport:
    """List root and print one size line per subdirectory, in listing order.

    OSError from listing root propagates. Failures on a single subdirectory
    are reported and that subdirectory is skipped.
    """
    entries = list_entries(root)
    report = ScanReport()
    for entry in subdirectories(entries, exclude):
        sub_path = os.path.join(root, entry.name)
        try:
            size = compute_size(sub_path, on_error=on_error)
        except OSError as exc:
            console.print(f"[red]Error calculating size for {printable(sub_path)}: {printable(exc)}[/]")
            report.failed.append((sub_path, str(exc)))
            continue
        print_directory_size(entry.name, size, unit)
        report.printed.append((entry.name, size))
    return report
