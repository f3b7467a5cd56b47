"""Tests for the navigation stack."""

import pytest

from cmd_palette import Action, EmptyStackError, NavigationStack


@pytest.fixture
def stack():
    return NavigationStack()


class TestNavigationStack:
    def test_starts_at_root(self, stack):
        assert stack.depth == 0
        assert stack.path == ()
        assert stack.top is None

    def test_enter_pushes_frame(self, stack, flat_commands):
        children = (("date", Action("D")),)
        frame = stack.enter("insert", children, flat_commands, flat_commands[:1], "to", 0)
        assert stack.depth == 1
        assert stack.path == ("insert",)
        assert stack.top is frame
        assert frame.children == children
        assert frame.parent_commands == flat_commands
        assert frame.parent_filtered == flat_commands[:1]
        assert frame.parent_query == "to"

    def test_leave_pops_in_lifo_order(self, stack):
        stack.enter("a", (), (), (), "")
        stack.enter("b", (), (), (), "q")
        assert stack.path == ("a", "b")

        assert stack.leave().name == "b"
        assert stack.path == ("a",)
        assert stack.leave().name == "a"
        assert len(stack) == 0

    def test_leave_at_root_raises(self, stack):
        with pytest.raises(EmptyStackError):
            stack.leave()

    def test_empty_stack_error_is_index_error(self, stack):
        with pytest.raises(IndexError):
            stack.leave()

    def test_clear(self, stack):
        stack.enter("a", (), (), (), "")
        stack.clear()
        assert stack.depth == 0
