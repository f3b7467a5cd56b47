"""Trigger detection and query extraction.

Helpers for hosts that open the palette from a text input: typing a
trigger character at the start of a line opens a session, and everything
typed after it on that line is the query.
"""

from __future__ import annotations

from collections.abc import Iterable

from .config import PaletteConfig


class TriggerDetector:
    """Decides when a keystroke should open the palette."""

    def __init__(self, trigger_characters: Iterable[str] | None = None):
        if trigger_characters is None:
            trigger_characters = PaletteConfig().trigger_characters
        self.trigger_characters = frozenset(trigger_characters)

    @classmethod
    def from_config(cls, cfg: PaletteConfig) -> "TriggerDetector":
        return cls(cfg.trigger_characters)

    def should_trigger(self, text_before_cursor: str, char: str) -> bool:
        """Check if typing char at the cursor opens the palette.

        Only fires in the line-start context: nothing but whitespace before
        the cursor on the current line.
        """
        if char not in self.trigger_characters:
            return False
        line = text_before_cursor.rsplit("\n", 1)[-1]
        return not line.strip()

    def extract_query(self, line: str, anchor: int) -> str:
        """Get the query typed after the trigger.

        Args:
            line: Current line contents.
            anchor: Column just after the trigger character.

        Returns:
            Text after the anchor with leading trigger characters removed.
        """
        if anchor >= len(line):
            return ""
        return line[max(anchor, 0) :].lstrip("".join(self.trigger_characters))
