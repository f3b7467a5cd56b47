"""Configurable themes for the terminal host.

The Theme dataclass holds the visual elements (colors, icons, layout)
used when the terminal host renders a RenderModel.
"""

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for the palette panel.

    All colors use Rich markup format (e.g., "green", "bold cyan", "dim").

    Attributes:
        selected_color: Color for cursor indicator and selected row.
        match_color: Color for the matched part of a command name.
        submenu_color: Color for the submenu indicator.
        dim_color: Color for dimmed/secondary text.
        border_color: Color for panel border.

        cursor_icon: Character shown next to selected item.
        prompt_icon: Character shown before the query.
        breadcrumb_separator: Text between breadcrumb names in the title.
        scroll_up_icon: Character indicating more items above.
        scroll_down_icon: Character indicating more items below.

        panel_width: Fixed width of the palette panel.
    """

    # Colors
    selected_color: str = "cyan"
    match_color: str = "bold yellow"
    submenu_color: str = "magenta"
    dim_color: str = "dim"
    border_color: str = "cyan"

    # Icons
    cursor_icon: str = "›"
    prompt_icon: str = ">"
    breadcrumb_separator: str = " / "
    scroll_up_icon: str = "↑"
    scroll_down_icon: str = "↓"

    # Layout
    panel_width: int = 60


# Default theme used when none is specified
DEFAULT_THEME = Theme()
