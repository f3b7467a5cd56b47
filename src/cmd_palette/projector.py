"""Render model projection.

Maps session state to a display-ready RenderModel. Pure: it reads the
state and never changes it, so hosts can call it on every repaint.
"""

from __future__ import annotations

from .matcher import match_span
from .types import RenderModel, Submenu, VisibleItem


def window_offset(selected_index: int, total: int, max_visible: int, previous: int = 0) -> int:
    """Get the first visible index for a window that keeps the selection in view.

    The window stays at previous until the selection leaves it, then scrolls
    just far enough to show the selection again.
    """
    if total <= max_visible:
        return 0
    offset = min(max(previous, 0), total - max_visible)
    if selected_index < offset:
        offset = selected_index
    elif selected_index >= offset + max_visible:
        offset = selected_index - max_visible + 1
    return offset


def project(source, max_visible_items: int = 10, submenu_indicator: str = "»") -> RenderModel:
    """Project a session (or its SessionState) into a RenderModel.

    Args:
        source: A Session or SessionState.
        max_visible_items: Maximum number of items in the window.
        submenu_indicator: Marker appended to submenu labels.

    Returns:
        RenderModel for the current level; empty if the session is closed.
    """
    state = getattr(source, "state", source)
    if not state.is_active:
        return RenderModel()

    filtered = state.filtered
    total = len(filtered)
    offset = window_offset(state.selected_index, total, max_visible_items, state.window_offset)

    items = []
    for i, (name, entry) in enumerate(filtered[offset : offset + max_visible_items]):
        submenu = isinstance(entry, Submenu)
        span = match_span(name, state.query) if state.query else None
        items.append(
            VisibleItem(
                name=name,
                is_submenu=submenu,
                is_selected=offset + i == state.selected_index,
                label=f"{name} {submenu_indicator}" if submenu else name,
                match_start=span[0] if span else None,
                match_end=span[1] if span else None,
            )
        )

    return RenderModel(
        breadcrumb=state.path,
        visible_items=tuple(items),
        truncated=total > max_visible_items,
        query=state.query,
        offset=offset,
        total=total,
    )
