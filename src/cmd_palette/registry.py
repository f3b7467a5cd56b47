"""Command registry for cmd-palette.

Holds one ordered command list per context (for example one per editor
buffer type). Registration always replaces a context's list wholesale;
sessions are seeded from immutable snapshots so later registration never
leaks into a palette that is already open.

Registries can also be loaded from YAML:

    global:
      todo: org.todo
      insert:
        date: insert.date
        time: insert.time

A scalar value is an action reference, a mapping is a submenu.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

import yaml

from .errors import RegistryFormatError
from .types import Action, Commands, CommandEntry, Submenu

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT = "global"


def build_entries(data: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> Commands:
    """Convert nested mappings or (name, value) pairs into command entries.

    Args:
        data: Mapping (or pair sequence) of name to value. Values may be
            existing entries, nested mappings (submenus) or scalars (actions).

    Returns:
        Ordered tuple of (name, entry) pairs.

    Raises:
        RegistryFormatError: If a value cannot be turned into an entry.
    """
    pairs = data.items() if isinstance(data, Mapping) else data
    entries: list[tuple[str, CommandEntry]] = []
    for pair in pairs:
        try:
            name, value = pair
        except (TypeError, ValueError):
            raise RegistryFormatError(f"Expected (name, entry) pair, got {pair!r}") from None
        entries.append((str(name), _to_entry(str(name), value)))
    return tuple(entries)


def _to_entry(name: str, value: Any) -> CommandEntry:
    if isinstance(value, (Action, Submenu)):
        return value
    if isinstance(value, Mapping):
        return Submenu(build_entries(value))
    if isinstance(value, (str, int, float, bool)):
        return Action(value)
    raise RegistryFormatError(f"Unsupported value for command '{name}': {type(value).__name__}")


def walk(entries: Commands, prefix: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], Action]]:
    """Yield (path, action) for every leaf, depth-first in display order."""
    for name, entry in entries:
        path = prefix + (name,)
        if isinstance(entry, Submenu):
            yield from walk(entry.children, path)
        else:
            yield path, entry


class CommandRegistry:
    """Per-context command lists."""

    def __init__(self):
        self._contexts: dict[str, Commands] = {}

    def register(self, context: str, entries) -> None:
        """Replace the whole command list for a context.

        Args:
            context: Context name.
            entries: (name, entry) pairs or a nested mapping.
        """
        self._contexts[context] = build_entries(entries)
        logger.debug(f"Registered {len(self._contexts[context])} commands for '{context}'")

    def clear(self, context: str) -> None:
        """Empty a context's command list."""
        if context in self._contexts:
            self._contexts[context] = ()
            logger.debug(f"Cleared commands for '{context}'")

    def snapshot(self, context: str = DEFAULT_CONTEXT) -> Commands:
        """Get an immutable copy of a context's commands (empty if unknown)."""
        return self._contexts.get(context, ())

    def has(self, context: str) -> bool:
        """Check if a context has been registered."""
        return context in self._contexts

    def contexts(self) -> list[str]:
        """List registered contexts in registration order."""
        return list(self._contexts)


def load_registry_file(path: Path, registry: CommandRegistry | None = None) -> CommandRegistry:
    """Load contexts from a YAML registry file.

    Args:
        path: YAML file mapping context names to command mappings.
        registry: Registry to register into (a new one if None).

    Returns:
        The registry the contexts were registered into.

    Raises:
        FileNotFoundError: If the file does not exist.
        RegistryFormatError: If the file is not valid registry YAML.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Registry file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RegistryFormatError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise RegistryFormatError(f"Registry file must contain a mapping of contexts: {path}")

    registry = registry if registry is not None else CommandRegistry()
    for context, entries in data.items():
        if entries is None:
            entries = {}
        if not isinstance(entries, dict):
            raise RegistryFormatError(f"Context '{context}' must be a mapping of commands")
        registry.register(str(context), entries)

    logger.debug(f"Loaded {len(data)} contexts from {path}")
    return registry
