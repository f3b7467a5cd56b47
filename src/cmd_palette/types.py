"""Type definitions for cmd-palette.

Shared dataclasses for command entries, navigation frames, activation
results and the render model. Everything here is immutable; the only
mutable object in the engine is the session state (see session.py).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


# ── command entries ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class Action:
    """A leaf command.

    Attributes:
        reference: Opaque handle the host resolves to something executable.
    """

    reference: Any


@dataclass(frozen=True)
class Submenu:
    """A named nested command list.

    Attributes:
        children: Ordered (name, entry) pairs shown when the submenu is entered.
    """

    children: tuple[tuple[str, "CommandEntry"], ...] = ()

    def __post_init__(self):
        # Accept lists from callers, store a tuple
        object.__setattr__(self, "children", tuple(tuple(pair) for pair in self.children))


CommandEntry = Union[Action, Submenu]
Command = tuple[str, CommandEntry]
Commands = tuple[Command, ...]


def is_submenu(entry: CommandEntry) -> bool:
    """Check if an entry opens a nested level."""
    return isinstance(entry, Submenu)


# ── navigation ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class NavigationFrame:
    """Parent-level state saved when a submenu is entered."""

    name: str
    children: Commands
    parent_commands: Commands
    parent_filtered: Commands
    parent_query: str
    parent_selected_index: int = 0


# ── activation results ────────────────────────────────────────────────────


@dataclass(frozen=True)
class Commit:
    """A leaf command was chosen.

    Attributes:
        reference: The action's opaque reference.
        path: Breadcrumb names followed by the chosen leaf name.
    """

    reference: Any
    path: tuple[str, ...]


@dataclass(frozen=True)
class Navigated:
    """A submenu was entered; path is the new breadcrumb."""

    path: tuple[str, ...]


@dataclass(frozen=True)
class NoOp:
    """Nothing was selectable (empty results or closed session)."""


ActivationResult = Union[Commit, Navigated, NoOp]


# ── render model ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class VisibleItem:
    """One row of the projected view."""

    name: str
    is_submenu: bool
    is_selected: bool
    label: str = ""
    match_start: int | None = None
    match_end: int | None = None


@dataclass(frozen=True)
class RenderModel:
    """Display-ready view of a session.

    Attributes:
        breadcrumb: Names of the submenus entered from the root.
        visible_items: Window of ranked items, at most max_visible_items long.
        truncated: True when more ranked items exist than fit in the window.
        query: Current query string.
        offset: Index of the first visible item within the ranked list.
        total: Number of ranked items.
    """

    breadcrumb: tuple[str, ...] = ()
    visible_items: tuple[VisibleItem, ...] = field(default_factory=tuple)
    truncated: bool = False
    query: str = ""
    offset: int = 0
    total: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.visible_items

    @property
    def items_below(self) -> int:
        """Number of ranked items past the end of the window."""
        return max(0, self.total - self.offset - len(self.visible_items))
