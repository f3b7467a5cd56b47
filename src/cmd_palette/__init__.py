"""Host-agnostic command palette engine.

Filters a hierarchical set of named commands by a live query, tracks the
selection cursor and submenu navigation, and projects a display-ready view.

Example:
    from cmd_palette import CommandRegistry, Commit, open_session

    registry = CommandRegistry()
    registry.register("global", {"todo": "org.todo", "insert": {"date": "insert.date"}})

    session = open_session(registry.snapshot("global"))
    session.set_query("ins")
    session.activate_selected()  # Navigated(path=("insert",))
    result = session.activate_selected()  # Commit(reference="insert.date", ...)
"""

__version__ = "0.3.0"

from .config import PaletteConfig, load_config
from .errors import (
    ConfigError,
    EmptyStackError,
    InvalidIndexError,
    PaletteError,
    RegistryFormatError,
    StaleSessionError,
)
from .keys import Activate, Back, Cancel, Move, QueryChanged, dispatch, translate_key
from .matcher import filter_and_rank, match_position
from .navigation import NavigationStack
from .projector import project
from .registry import CommandRegistry, build_entries, load_registry_file, walk
from .session import Session, SessionManager, SessionState, open_session
from .trigger import TriggerDetector
from .types import (
    Action,
    Commit,
    Navigated,
    NavigationFrame,
    NoOp,
    RenderModel,
    Submenu,
    VisibleItem,
)

__all__ = [
    # Core
    "open_session",
    "Session",
    "SessionManager",
    "SessionState",
    "CommandRegistry",
    "NavigationStack",
    "filter_and_rank",
    "match_position",
    "project",
    # Entries and results
    "Action",
    "Submenu",
    "NavigationFrame",
    "Commit",
    "Navigated",
    "NoOp",
    "RenderModel",
    "VisibleItem",
    # Registry loading
    "build_entries",
    "load_registry_file",
    "walk",
    # Host helpers
    "TriggerDetector",
    "translate_key",
    "dispatch",
    "QueryChanged",
    "Move",
    "Activate",
    "Back",
    "Cancel",
    # Config
    "PaletteConfig",
    "load_config",
    # Errors
    "PaletteError",
    "EmptyStackError",
    "InvalidIndexError",
    "StaleSessionError",
    "RegistryFormatError",
    "ConfigError",
]
