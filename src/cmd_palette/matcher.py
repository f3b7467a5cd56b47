"""Substring filtering with positional ranking.

A command matches when its name contains the query (case-insensitive).
Matches are ordered by where the query first occurs in the name, so prefix
matches come first; ties keep registry order.
"""

from __future__ import annotations

from collections.abc import Iterable

from .types import Command, Commands


def match_span(name: str, query: str) -> tuple[int, int] | None:
    """Get the (start, end) of the first case-insensitive match of query in name.

    Offsets index into the original name, even when casefolding changes a
    character's length ("ß" folds to "ss").

    Returns None when the name does not contain the query.
    """
    folded_query = query.casefold()
    if not folded_query:
        return (0, 0)

    # owners[i] is the index in name of the character that produced folded[i]
    folded_parts = []
    owners: list[int] = []
    for i, char in enumerate(name):
        folded_char = char.casefold()
        folded_parts.append(folded_char)
        owners.extend([i] * len(folded_char))

    pos = "".join(folded_parts).find(folded_query)
    if pos < 0:
        return None
    return owners[pos], owners[pos + len(folded_query) - 1] + 1


def match_position(name: str, query: str) -> int | None:
    """Get the index in name of the first case-insensitive occurrence of query.

    Returns None when the name does not contain the query.
    """
    span = match_span(name, query)
    return span[0] if span is not None else None


def filter_and_rank(commands: Iterable[Command], query: str) -> Commands:
    """Filter commands by name and rank them by first-match position.

    Args:
        commands: Ordered (name, entry) pairs.
        query: Text typed by the user. Empty means no filtering.

    Returns:
        Ranked (name, entry) pairs; empty when nothing matches.
    """
    commands = tuple(commands)
    if not query:
        return commands

    scored = []
    for command in commands:
        pos = match_position(command[0], query)
        if pos is not None:
            scored.append((pos, command))

    # sort() is stable, so equal positions keep registry order
    scored.sort(key=lambda x: x[0])
    return tuple(command for _, command in scored)
