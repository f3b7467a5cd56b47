"""Tests for substring filtering and ranking."""

from cmd_palette import Action, Submenu, filter_and_rank, match_position
from cmd_palette.matcher import match_span


class TestEmptyQuery:
    def test_identity(self, flat_commands):
        assert filter_and_rank(flat_commands, "") == flat_commands

    def test_identity_keeps_submenus(self, nested_commands):
        assert filter_and_rank(nested_commands, "") == nested_commands

    def test_empty_commands(self):
        assert filter_and_rank((), "") == ()
        assert filter_and_rank((), "x") == ()

    def test_accepts_lists(self, flat_commands):
        assert filter_and_rank(list(flat_commands), "") == flat_commands


class TestSubstring:
    def test_only_todo_contains_to(self, flat_commands):
        assert filter_and_rank(flat_commands, "to") == (("todo", Action("A")),)

    def test_case_insensitive(self):
        commands = (("ToDo", Action(1)), ("other", Action(2)))
        assert filter_and_rank(commands, "tOD") == (("ToDo", Action(1)),)

    def test_not_subsequence(self):
        # "tdo" is a subsequence of "todo" but not a substring
        assert filter_and_rank((("todo", Action(1)),), "tdo") == ()

    def test_no_match_is_empty(self, flat_commands):
        assert filter_and_rank(flat_commands, "xyz") == ()

    def test_inclusion_matches_substring_check(self, nested_commands):
        for query in ["i", "T", "form", "zz", "o"]:
            names = {name for name, _ in filter_and_rank(nested_commands, query)}
            expected = {
                name for name, _ in nested_commands if query.casefold() in name.casefold()
            }
            assert names == expected

    def test_submenus_are_matched_by_name(self, nested_commands):
        result = filter_and_rank(nested_commands, "ins")
        assert len(result) == 1
        assert result[0][0] == "insert"
        assert isinstance(result[0][1], Submenu)


class TestRanking:
    def test_prefix_first(self):
        commands = (
            ("subtable", Action(1)),
            ("table", Action(2)),
            ("a-table", Action(3)),
        )
        ranked = [name for name, _ in filter_and_rank(commands, "table")]
        assert ranked == ["table", "a-table", "subtable"]

    def test_ties_keep_registry_order(self):
        commands = (
            ("bold", Action(1)),
            ("bottom", Action(2)),
            ("abo", Action(3)),
            ("box", Action(4)),
        )
        ranked = [name for name, _ in filter_and_rank(commands, "bo")]
        assert ranked == ["bold", "bottom", "box", "abo"]

    def test_ranks_by_first_occurrence(self):
        commands = (("xxab-ab", Action(1)), ("xab", Action(2)))
        ranked = [name for name, _ in filter_and_rank(commands, "ab")]
        assert ranked == ["xab", "xxab-ab"]


class TestMatchPosition:
    def test_found(self):
        assert match_position("Insert Date", "date") == 7

    def test_prefix(self):
        assert match_position("todo", "TO") == 0

    def test_missing(self):
        assert match_position("todo", "x") is None

    def test_position_in_original_name(self):
        # "ß" folds to "ss", which must not shift later offsets
        assert match_position("Straße todo", "todo") == 7


class TestMatchSpan:
    def test_span(self):
        assert match_span("Insert Date", "DATE") == (7, 11)

    def test_span_after_expanding_fold(self):
        assert match_span("Straße todo", "todo") == (7, 11)

    def test_span_covers_folded_character(self):
        assert match_span("Straße", "SS") == (4, 5)

    def test_missing(self):
        assert match_span("todo", "x") is None

    def test_ranking_uses_original_positions(self):
        commands = (("ßx", Action(1)), ("sx", Action(2)))
        ranked = [name for name, _ in filter_and_rank(commands, "x")]
        assert ranked == ["ßx", "sx"]
