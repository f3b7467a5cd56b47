"""Submenu navigation stack."""

from __future__ import annotations

import logging

from .errors import EmptyStackError
from .types import Commands, NavigationFrame

logger = logging.getLogger(__name__)


class NavigationStack:
    """LIFO of frames saved when entering submenus.

    The breadcrumb path is derived from the frames, so the path and the
    stack always have the same depth.
    """

    def __init__(self):
        self._frames: list[NavigationFrame] = []

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def path(self) -> tuple[str, ...]:
        """Names of the submenus entered, root first."""
        return tuple(frame.name for frame in self._frames)

    @property
    def top(self) -> NavigationFrame | None:
        return self._frames[-1] if self._frames else None

    def enter(
        self,
        name: str,
        children: Commands,
        parent_commands: Commands,
        parent_filtered: Commands,
        parent_query: str,
        parent_selected_index: int = 0,
    ) -> NavigationFrame:
        """Push a frame for the submenu being entered.

        Returns:
            The pushed frame.
        """
        frame = NavigationFrame(
            name=name,
            children=tuple(children),
            parent_commands=tuple(parent_commands),
            parent_filtered=tuple(parent_filtered),
            parent_query=parent_query,
            parent_selected_index=parent_selected_index,
        )
        self._frames.append(frame)
        logger.debug(f"Entered submenu '{name}' (depth {self.depth})")
        return frame

    def leave(self) -> NavigationFrame:
        """Pop the top frame.

        Raises:
            EmptyStackError: If already at the root level.
        """
        if not self._frames:
            raise EmptyStackError()
        frame = self._frames.pop()
        logger.debug(f"Left submenu '{frame.name}' (depth {self.depth})")
        return frame

    def clear(self) -> None:
        self._frames.clear()

    def __len__(self) -> int:
        return len(self._frames)
