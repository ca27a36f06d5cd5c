#!/usr/bin/env python3
"""Command-line interface for dir-usage-cli."""
import json
import sys
import argparse

from rich.markup import escape
from rich.rule import Rule

from . import __version__
from .utils.console import console, printable
from .utils.disk import human_size
from .services import scanner_service as scanner
from .core import config as config_module


def _run_config(argv: list) -> None:
    """Run the configuration tasks."""
    p = argparse.ArgumentParser(prog="dir-usage config", description="Manage configuration.")
    p.add_argument("--init", action="store_true", help="Create default config file")
    p.add_argument("--show", action="store_true", help="Show current config")
    args = p.parse_args(argv)
    if args.init:
        path = config_module.init_config()
        console.print(Rule("[bold cyan]Config[/]", style="cyan"))
        console.print()
        console.print(f"  [green]✓[/] Created config at [cyan]{escape(path)}[/]")
        console.print()
        return
    if args.show:
        if not config_module.config_exists():
            console.print("[yellow]No config found. Run: dir-usage config --init[/]")
            return
        cfg = config_module.load()
        console.print(Rule("[bold cyan]Config[/]", style="cyan"))
        console.print()
        console.print(json.dumps(cfg, indent=2), markup=False)
        console.print()
        return
    p.print_help()


def build_parser(cfg: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dir-usage",
        description="Report disk usage of each immediate subdirectory of a directory.",
    )
    parser.add_argument("--dir", default=cfg["default_dir"],
                        help=f"Directory to summarize disk usage for (default: {cfg['default_dir']})")
    parser.add_argument("--unit", default=cfg["default_unit"],
                        help=f"Output unit: B (bytes), KB, or MB (default: {cfg['default_unit']})")
    parser.add_argument("--exclude", action="append", default=[], metavar="NAME",
                        help="Skip a subdirectory by name (repeatable).")
    parser.add_argument("--summary", action="store_true",
                        help="Print a count of listed and failed directories at the end.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    """Main function."""
    argv = argv if argv is not None else sys.argv[1:]
    if argv and argv[0] == "config":
        _run_config(argv[1:])
        return

    cfg = config_module.load()
    args = build_parser(cfg).parse_args(argv)
    exclude = list(cfg["exclude_dirs"]) + args.exclude

    try:
        report = scanner.scan(args.dir, args.unit, exclude=exclude)
    except OSError as exc:
        console.print(f"[red]Error reading directory: {printable(exc)}[/]")
        sys.exit(1)

    if args.summary:
        console.print(
            f"[dim]{len(report.printed)} directories listed, {len(report.failed)} failed"
            f" ({human_size(sum(size for _, size in report.printed))} total)[/]"
        )


if __name__ == "__main__":
    main()
