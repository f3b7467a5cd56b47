"""Keyboard input translation for cmd-palette.

Hosts turn raw keys into explicit palette events with translate_key()
and apply them with dispatch(). The session itself never sees raw keys.
"""

from __future__ import annotations

from dataclasses import dataclass

import readchar

from .types import ActivationResult


# ── events ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class QueryChanged:
    query: str


@dataclass(frozen=True)
class Move:
    delta: int


@dataclass(frozen=True)
class Activate:
    pass


@dataclass(frozen=True)
class Back:
    """Leave the current submenu."""


@dataclass(frozen=True)
class Cancel:
    pass


# ── key helpers ───────────────────────────────────────────────────────────


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b", "\x1b\x1b")


def is_interrupt(key: str) -> bool:
    return key == readchar.key.CTRL_C


def is_up(key: str) -> bool:
    """Check if key is up arrow or Ctrl+P."""
    return key in (readchar.key.UP, readchar.key.CTRL_P)


def is_down(key: str) -> bool:
    """Check if key is down arrow or Ctrl+N."""
    return key in (readchar.key.DOWN, readchar.key.CTRL_N)


def is_page_up(key: str) -> bool:
    return key == readchar.key.PAGE_UP


def is_page_down(key: str) -> bool:
    return key == readchar.key.PAGE_DOWN


def is_backspace(key: str) -> bool:
    """Check if key is backspace (handles terminal variations)."""
    return key in (readchar.key.BACKSPACE, "\x7f", "\b")


def is_tab(key: str) -> bool:
    return key == readchar.key.TAB


def translate_key(key: str, query: str, page_size: int = 10):
    """Translate a raw key into a palette event.

    Args:
        key: Key string as returned by readchar.readkey().
        query: Current query, used to build QueryChanged events.
        page_size: Step for PageUp/PageDown.

    Returns:
        An event, or None if the key has no meaning in the palette.
    """
    if is_enter(key) or is_tab(key):
        return Activate()
    if is_escape(key) or is_interrupt(key):
        return Cancel()
    if is_up(key):
        return Move(-1)
    if is_down(key):
        return Move(+1)
    if is_page_up(key):
        return Move(-page_size)
    if is_page_down(key):
        return Move(page_size)
    if is_backspace(key):
        if not query:
            return Back()
        return QueryChanged(query[:-1])
    if len(key) == 1 and key.isprintable():
        return QueryChanged(query + key)
    return None


def dispatch(session, event) -> ActivationResult | None:
    """Apply an event to a session.

    Returns:
        The activation result for Activate events, None otherwise.
    """
    if isinstance(event, QueryChanged):
        session.set_query(event.query)
    elif isinstance(event, Move):
        session.move_selection(event.delta)
    elif isinstance(event, Activate):
        return session.activate_selected()
    elif isinstance(event, Back):
        session.leave_submenu()
    elif isinstance(event, Cancel):
        session.cancel()
    return None
