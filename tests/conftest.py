"""Pytest fixtures for cmd-palette tests."""

import pytest

from cmd_palette import Action, Submenu, load_registry_file, open_session


@pytest.fixture
def flat_commands():
    """Scenario registry: todo, table, bold."""
    return (
        ("todo", Action("A")),
        ("table", Action("B")),
        ("bold", Action("C")),
    )


@pytest.fixture
def nested_commands():
    """Registry with a two-level submenu."""
    return (
        ("insert", Submenu((
            ("date", Action("D")),
            ("time", Action("T")),
            ("special", Submenu((
                ("arrow", Action("arrow")),
                ("em dash", Action("emdash")),
            ))),
        ))),
        ("todo", Action("todo")),
        ("format", Submenu((("bold", Action("bold")), ("italic", Action("italic"))))),
    )


@pytest.fixture
def session(nested_commands):
    return open_session(nested_commands)


@pytest.fixture
def many_commands():
    """Twenty-five leaf commands named cmd-00 .. cmd-24."""
    return tuple((f"cmd-{i:02d}", Action(i)) for i in range(25))


@pytest.fixture
def registry_file(tmp_path):
    """Write a registry YAML file and return its path."""
    path = tmp_path / "registry.yaml"
    path.write_text(
        "global:\n"
        "  todo: org.todo\n"
        "  table: org.table\n"
        "  insert:\n"
        "    date: insert.date\n"
        "    time: insert.time\n"
        "markdown:\n"
        "  bold: md.bold\n"
        "empty:\n"
    )
    return path


@pytest.fixture
def registry(registry_file):
    return load_registry_file(registry_file)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point config lookup at an empty temp directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("CMD_PALETTE_CONFIG", raising=False)
    return tmp_path / "xdg" / "cmd-palette" / "config.yaml"
