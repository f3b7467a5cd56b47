"""CLI interface for cmd-palette."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from . import __version__
from . import config as config_mod
from .errors import PaletteError
from .matcher import filter_and_rank
from .registry import DEFAULT_CONTEXT, CommandRegistry, load_registry_file
from .types import Action, Commands, Submenu

console = Console(highlight=False)


def _load(args) -> tuple[config_mod.PaletteConfig, CommandRegistry]:
    """Load config and the registry file named on the command line."""
    try:
        cfg = config_mod.load_config(Path(args.config) if args.config else None)
    except PaletteError as e:
        print(f"Error: {e}")
        sys.exit(1)
    path = args.file or cfg.registry_path
    if path is None:
        print("Error: No registry file given and none configured.")
        sys.exit(1)
    try:
        registry = load_registry_file(Path(path))
    except (FileNotFoundError, PaletteError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    return cfg, registry


def _snapshot(registry: CommandRegistry, context: str) -> Commands:
    if not registry.has(context):
        known = ", ".join(registry.contexts()) or "none"
        print(f"Error: Unknown context '{context}' (available: {known})")
        sys.exit(1)
    return registry.snapshot(context)


def _add_branch(tree: Tree, entries: Commands, indicator: str) -> None:
    for name, entry in entries:
        if isinstance(entry, Submenu):
            branch = tree.add(f"[magenta]{escape(name)} {escape(indicator)}[/magenta]")
            _add_branch(branch, entry.children, indicator)
        else:
            tree.add(f"{escape(name)} [dim]→ {escape(str(entry.reference))}[/dim]")


def cmd_list(args):
    """Print the command tree for a context."""
    cfg, registry = _load(args)
    entries = _snapshot(registry, args.context)
    if not entries:
        console.print(f"[yellow]No commands registered for '{escape(args.context)}'.[/yellow]")
        return
    tree = Tree(f"[bold]{escape(args.context)}[/bold]")
    _add_branch(tree, entries, cfg.submenu_indicator)
    console.print(tree)


def cmd_filter(args):
    """Print ranked matches for a query at a submenu level."""
    cfg, registry = _load(args)
    entries = _snapshot(registry, args.context)

    walked: list[str] = []
    for part in [p for p in (args.path or "").split("/") if p]:
        match = dict(entries).get(part)
        if not isinstance(match, Submenu):
            where = "/".join(walked) or "root"
            print(f"Error: No submenu '{part}' under {where}")
            sys.exit(1)
        walked.append(part)
        entries = match.children

    ranked = filter_and_rank(entries, args.query)
    if not ranked:
        console.print(f"[dim]No commands match '{escape(args.query)}'.[/dim]")
        return
    for name, entry in ranked:
        if isinstance(entry, Action):
            console.print(f"{escape(name)}  [dim]{escape(str(entry.reference))}[/dim]")
        else:
            console.print(f"{escape(name)} [magenta]{escape(cfg.submenu_indicator)}[/magenta]")


def cmd_run(args):
    """Open an interactive palette and print the chosen command."""
    from .host import TerminalHost
    from .session import open_session

    cfg, registry = _load(args)
    session = open_session(_snapshot(registry, args.context), cfg)
    commit = TerminalHost(session, console=console).run()
    if commit is None:
        sys.exit(1)
    print(commit.reference)
    if args.verbose:
        print(" / ".join(commit.path))


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="cmd-palette",
        description="cmd-palette: hierarchical command palette engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"cmd-palette {__version__}")
    parser.add_argument("--config", help="Config file (default: ~/.config/cmd-palette/config.yaml)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # list
    list_p = subparsers.add_parser("list", help="Show the command tree")
    list_p.add_argument("file", nargs="?", help="Registry YAML file (default: from config)")
    list_p.add_argument("--context", default=DEFAULT_CONTEXT, help="Registry context")
    list_p.set_defaults(func=cmd_list)

    # filter
    filter_p = subparsers.add_parser("filter", help="Show ranked matches for a query")
    filter_p.add_argument("file", help="Registry YAML file")
    filter_p.add_argument("query", nargs="?", default="", help="Query text")
    filter_p.add_argument("--context", default=DEFAULT_CONTEXT, help="Registry context")
    filter_p.add_argument("--path", help="Submenu path, e.g. insert/date")
    filter_p.set_defaults(func=cmd_filter)

    # run
    run_p = subparsers.add_parser("run", help="Open the interactive palette")
    run_p.add_argument("file", nargs="?", help="Registry YAML file (default: from config)")
    run_p.add_argument("--context", default=DEFAULT_CONTEXT, help="Registry context")
    run_p.add_argument("-v", "--verbose", action="store_true", help="Also print the command path")
    run_p.set_defaults(func=cmd_run)

    return parser


def main(argv: list[str] | None = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    try:
        if hasattr(args, "func"):
            args.func(args)
        else:
            parser.print_help()
    except KeyboardInterrupt:
        print()
        sys.exit(130)


if __name__ == "__main__":
    main()
