"""Palette session state machine.

A Session is one open palette, from open() until it is cancelled or a leaf
command is committed. The host drives it with explicit calls:

    session = open_session(registry.snapshot("global"))
    session.set_query("ins")
    session.move_selection(+1)
    result = session.activate_selected()
    if isinstance(result, Commit):
        run_action(result.reference)

States:
    Closed  <- initial/terminal
    Open@root  -> Open@depth-N via activate_selected() on a submenu
    any  -> Closed via cancel() or a Commit

Every call on a closed session is a no-op: UI events queued after a cancel
are expected, not exceptional.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .config import PaletteConfig
from .errors import InvalidIndexError, StaleSessionError
from .matcher import filter_and_rank
from .navigation import NavigationStack
from .projector import project, window_offset
from .types import (
    ActivationResult,
    Command,
    Commands,
    Commit,
    Navigated,
    NoOp,
    RenderModel,
    Submenu,
)

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """Mutable state owned by exactly one Session."""

    root_commands: Commands = ()
    active_commands: Commands = ()
    query: str = ""
    filtered: Commands = ()
    selected_index: int = 0
    window_offset: int = 0
    stack: NavigationStack = field(default_factory=NavigationStack)
    is_active: bool = False

    @property
    def path(self) -> tuple[str, ...]:
        return self.stack.path

    @property
    def depth(self) -> int:
        return self.stack.depth

    def entry_at(self, index: int) -> Command:
        """Get a ranked (name, entry) pair.

        Raises:
            InvalidIndexError: If index is outside the ranked list.
        """
        if not 0 <= index < len(self.filtered):
            raise InvalidIndexError(index, len(self.filtered))
        return self.filtered[index]


def _clamp(index: int, size: int) -> int:
    if size <= 0:
        return 0
    return max(0, min(index, size - 1))


class Session:
    """Handle for one command palette.

    A bare Session() starts closed; Session.open() (or open_session()) is the
    only way into the open state.
    """

    def __init__(self, config: PaletteConfig | None = None):
        self.config = config or PaletteConfig()
        self.state = SessionState()

    @classmethod
    def open(cls, snapshot: Iterable[Command], config: PaletteConfig | None = None) -> "Session":
        """Open a session at the root of a registry snapshot."""
        session = cls(config)
        session._open(tuple(snapshot))
        return session

    def _open(self, snapshot: Commands) -> None:
        self.state = SessionState(
            root_commands=snapshot,
            active_commands=snapshot,
            filtered=filter_and_rank(snapshot, ""),
            is_active=True,
        )
        logger.debug(f"Opened palette with {len(snapshot)} commands")

    # ── queries ───────────────────────────────────────────────────────────

    @property
    def is_active(self) -> bool:
        return self.state.is_active

    @property
    def query(self) -> str:
        return self.state.query

    @property
    def path(self) -> tuple[str, ...]:
        return self.state.path

    @property
    def filtered(self) -> Commands:
        return self.state.filtered

    @property
    def selected_index(self) -> int:
        return self.state.selected_index

    @property
    def active_commands(self) -> Commands:
        return self.state.active_commands

    def selected(self) -> Command | None:
        """Get the selected (name, entry) pair, or None if nothing is selectable."""
        if not self.state.is_active or not self.state.filtered:
            return None
        return self.state.entry_at(self.state.selected_index)

    def require_active(self) -> None:
        """Raise if the session has been closed.

        Raises:
            StaleSessionError: If the session is closed.
        """
        if not self.state.is_active:
            raise StaleSessionError()

    # ── events ────────────────────────────────────────────────────────────

    def set_query(self, new_query: str) -> None:
        """Replace the query and re-rank the current level."""
        state = self.state
        if not state.is_active:
            logger.debug("Ignoring set_query on closed session")
            return
        if new_query == state.query:
            return

        filtered = filter_and_rank(state.active_commands, new_query)
        state.query, state.filtered, state.selected_index = new_query, filtered, 0
        state.window_offset = 0

        if not filtered and self.config.close_on_empty and state.depth == 0:
            logger.debug(f"No commands match '{new_query}', closing")
            self.cancel()

    def move_selection(self, delta: int) -> None:
        """Move the cursor by delta, clamped to the ranked list."""
        state = self.state
        if not state.is_active or not state.filtered:
            return
        state.selected_index = _clamp(state.selected_index + delta, len(state.filtered))
        state.window_offset = window_offset(
            state.selected_index,
            len(state.filtered),
            self.config.max_visible_items,
            state.window_offset,
        )

    def activate_selected(self) -> ActivationResult:
        """Activate the selected command.

        Returns:
            Commit for a leaf (the session closes), Navigated for a submenu,
            NoOp when nothing is selectable.
        """
        state = self.state
        if not state.is_active or not state.filtered:
            return NoOp()

        name, entry = state.entry_at(state.selected_index)
        if isinstance(entry, Submenu):
            return self._enter(name, entry)

        result = Commit(reference=entry.reference, path=state.path + (name,))
        logger.debug(f"Committed {'/'.join(result.path)}")
        self.cancel()
        return result

    def _enter(self, name: str, submenu: Submenu) -> Navigated:
        state = self.state
        state.stack.enter(
            name,
            submenu.children,
            parent_commands=state.active_commands,
            parent_filtered=state.filtered,
            parent_query=state.query,
            parent_selected_index=state.selected_index,
        )
        state.active_commands = submenu.children
        state.query = ""
        state.filtered = filter_and_rank(submenu.children, "")
        state.selected_index = 0
        state.window_offset = 0
        return Navigated(path=state.path)

    def leave_submenu(self) -> bool:
        """Return to the parent level, restoring its query and selection.

        Returns:
            True if a level was left, False at the root or on a closed session.
        """
        state = self.state
        if not state.is_active or state.depth == 0:
            return False

        frame = state.stack.leave()
        state.active_commands = frame.parent_commands
        state.query = frame.parent_query
        state.filtered = frame.parent_filtered
        state.selected_index = _clamp(frame.parent_selected_index, len(frame.parent_filtered))
        state.window_offset = window_offset(
            state.selected_index, len(state.filtered), self.config.max_visible_items
        )
        return True

    def cancel(self) -> None:
        """Close the session and discard all state. Idempotent."""
        if not self.state.is_active:
            return
        self.state.stack.clear()
        self.state = SessionState()
        logger.debug("Palette closed")

    # ── rendering ─────────────────────────────────────────────────────────

    def project(self) -> RenderModel:
        """Project the session with its configured window size and indicator."""
        return project(
            self,
            max_visible_items=self.config.max_visible_items,
            submenu_indicator=self.config.submenu_indicator,
        )


def open_session(snapshot: Iterable[Command], config: PaletteConfig | None = None) -> Session:
    """Open a session at the root of a registry snapshot."""
    return Session.open(snapshot, config)


class SessionManager:
    """Tracks at most one open session per host context."""

    def __init__(self, config: PaletteConfig | None = None):
        self.config = config or PaletteConfig()
        self._sessions: dict[str, Session] = {}

    def open(self, context: str, snapshot: Iterable[Command]) -> Session:
        """Open a session for a context, cancelling any session already open there."""
        existing = self._sessions.get(context)
        if existing is not None and existing.is_active:
            logger.debug(f"Replacing open palette for '{context}'")
            existing.cancel()
        session = Session.open(snapshot, self.config)
        self._sessions[context] = session
        return session

    def get(self, context: str) -> Session | None:
        """Get the open session for a context, or None."""
        session = self._sessions.get(context)
        if session is None or not session.is_active:
            self._sessions.pop(context, None)
            return None
        return session

    def close(self, context: str) -> None:
        session = self._sessions.pop(context, None)
        if session is not None:
            session.cancel()

    def active_contexts(self) -> list[str]:
        return [ctx for ctx, session in self._sessions.items() if session.is_active]
