"""Reference terminal host using Rich.Live.

Drives a Session from the keyboard and renders its RenderModel as a
flicker-free panel. It only uses the public session API, the same way an
editor integration would.

Example:
    from cmd_palette import open_session
    from cmd_palette.host import TerminalHost

    session = open_session(registry.snapshot("global"))
    commit = TerminalHost(session).run()
    if commit:
        print(commit.reference)
"""

from __future__ import annotations

import logging

import readchar
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel

from .keys import dispatch, translate_key
from .session import Session
from .themes import DEFAULT_THEME, Theme
from .types import Commit, RenderModel, VisibleItem

logger = logging.getLogger(__name__)


class TerminalHost:
    """Keyboard loop around a palette session.

    Keyboard controls:
        - Type to filter, Backspace to delete (or go back when empty)
        - Up/Down or Ctrl+P/Ctrl+N: Navigate, PageUp/PageDown: jump a page
        - Enter/Tab: Run command or open submenu
        - Esc or Ctrl+C: Close

    Args:
        session: Open session to drive.
        console: Optional Rich Console for output (auto-created if not provided).
        theme: Optional Theme for customizing appearance.
    """

    def __init__(self, session: Session, console: Console | None = None, theme: Theme | None = None):
        self.session = session
        self.console = console or Console()
        self.theme = theme or DEFAULT_THEME
        self.result: Commit | None = None

    def handle_key(self, key: str) -> None:
        """Translate a key and apply it to the session."""
        event = translate_key(key, self.session.query, self.session.config.max_visible_items)
        if event is None:
            return
        outcome = dispatch(self.session, event)
        if isinstance(outcome, Commit):
            self.result = outcome

    def _render_item(self, item: VisibleItem) -> str:
        t = self.theme
        name = item.name
        if item.match_start is not None and item.match_end is not None:
            text = (
                escape(name[: item.match_start])
                + f"[{t.match_color}]{escape(name[item.match_start : item.match_end])}[/{t.match_color}]"
                + escape(name[item.match_end :])
            )
        else:
            text = escape(name)

        # the projector appends the submenu indicator to the label
        suffix = item.label[len(name) :] if item.label.startswith(name) else ""
        if suffix:
            text += f"[{t.submenu_color}]{escape(suffix)}[/{t.submenu_color}]"

        if item.is_selected:
            return f"[{t.selected_color}]{t.cursor_icon}[/{t.selected_color}] [bold]{text}[/bold]"
        return f"  {text}"

    def _title(self, model: RenderModel) -> str:
        if not model.breadcrumb:
            return "[bold]Commands[/bold]"
        return "[bold]" + escape(self.theme.breadcrumb_separator.join(model.breadcrumb)) + "[/bold]"

    def render(self) -> Panel:
        """Render the current session state as a Rich Panel."""
        t = self.theme
        model = self.session.project()

        lines = [f"[{t.selected_color}]{t.prompt_icon}[/{t.selected_color}] {escape(model.query)}", ""]

        if model.offset > 0:
            lines.append(
                f"[{t.dim_color}]  {t.scroll_up_icon} {model.offset} more above[/{t.dim_color}]"
            )

        if model.is_empty:
            lines.append(f"[{t.dim_color}]  no matching commands[/{t.dim_color}]")
        for item in model.visible_items:
            lines.append(self._render_item(item))

        if model.items_below > 0:
            lines.append(
                f"[{t.dim_color}]  {t.scroll_down_icon} {model.items_below} more below[/{t.dim_color}]"
            )

        footer = (
            f"[{t.dim_color}]{t.scroll_up_icon}{t.scroll_down_icon} navigate "
            f"• Enter select • Backspace back • Esc close[/{t.dim_color}]"
        )

        return Panel(
            "\n".join(lines) + f"\n\n{footer}",
            title=self._title(model),
            border_style=t.border_color,
            width=t.panel_width,
        )

    def run(self) -> Commit | None:
        """Display the palette and block until a command is chosen or it closes.

        Returns:
            The Commit for the chosen command, or None if cancelled.
        """
        with Live(self.render(), console=self.console, refresh_per_second=20, transient=True) as live:
            while self.session.is_active:
                try:
                    key = readchar.readkey()
                except KeyboardInterrupt:
                    self.session.cancel()
                    break
                self.handle_key(key)
                if self.session.is_active:
                    live.update(self.render())

        if self.result is None:
            logger.debug("Palette cancelled")
        return self.result
