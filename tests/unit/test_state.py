"""Unit tests for tag contexts and the open-element stack."""

import pytest

from html2md.state import ConversionState, StackEntry, TagContext


@pytest.mark.unit
class TestTagContext:
    """Tests for attribute access on scanned tags."""

    def test_captured_attributes(self):
        tag = TagContext(
            "a",
            attributes={"href": "/x", "title": "T", "class": "c", "src": "s", "alt": "A", "align": "center"},
        )
        assert tag.href == "/x"
        assert tag.title == "T"
        assert tag.css_class == "c"
        assert tag.src == "s"
        assert tag.alt == "A"
        assert tag.align == "center"

    def test_missing_attributes_are_empty(self):
        tag = TagContext("img")
        assert tag.src == ""
        assert tag.get("data-x", "fallback") == "fallback"


@pytest.mark.unit
class TestHiddenHeuristic:
    """Tests for the attribute based hidden-content check."""

    @pytest.mark.parametrize(
        "attributes",
        [
            {"aria-hidden": "true"},
            {"aria-hidden": " TRUE "},
            {"aria": "hidden"},
            {"style": "display:none"},
            {"style": "color: red; display: none;"},
            {"style": "visibility: hidden !important"},
            {"style": "opacity:0"},
            {"style": "opacity: 0.0"},
            {"style": "opacity: 0%"},
            {"class": "js-file Details-content--hidden-not-important"},
        ],
    )
    def test_hidden(self, attributes):
        assert TagContext("div", attributes=attributes).is_hidden()

    @pytest.mark.parametrize(
        "attributes",
        [
            {},
            {"aria-hidden": "false"},
            {"style": "display: block"},
            {"style": "opacity: 0.5"},
            {"style": "opacity: auto"},
            {"style": "display"},
            {"class": "hidden-ish"},
        ],
    )
    def test_visible(self, attributes):
        assert not TagContext("div", attributes=attributes).is_hidden()


@pytest.mark.unit
class TestOpenElementStack:
    """Tests for push/pop and the balance report."""

    def test_pop_matching_top(self, state):
        state.push("div")
        state.push("p")
        assert state.pop("p") is True
        assert [entry.name for entry in state.open_elements] == ["div"]

    def test_pop_deeper_entry_closes_everything_above(self, state):
        state.push("div")
        state.push("p")
        state.push("b")
        assert state.pop("div") is True
        assert state.is_balanced()

    def test_pop_stray_leaves_stack_alone(self, state):
        state.push("div")
        assert state.pop("span") is False
        assert [entry.name for entry in state.open_elements] == ["div"]

    def test_pop_innermost_of_same_name(self, state):
        state.push("div")
        state.push("div")
        state.pop("div")
        assert len(state.open_elements) == 1

    def test_has_open(self, state):
        state.push("a")
        assert state.has_open("a")
        assert not state.has_open("b")

    def test_find_open_returns_innermost_index(self, state):
        state.push("div")
        state.push("p")
        state.push("div")
        assert state.find_open("div") == 2
        assert state.find_open("p") == 1
        assert state.find_open("span") is None

    def test_balance(self, state):
        assert state.is_balanced()
        state.push("div")
        assert not state.is_balanced()


@pytest.mark.unit
class TestIgnoredContent:
    """Tests for output suppression inside ignored elements."""

    def test_empty_stack_is_not_ignored(self, state):
        assert not state.is_in_ignored()

    @pytest.mark.parametrize("name", ["script", "style", "nav", "noscript", "template"])
    def test_ignored_elements(self, state, name):
        state.push(name)
        assert state.is_in_ignored()

    def test_hidden_entry_is_ignored(self, state):
        state.push("div", hidden=True)
        assert state.is_in_ignored()

    def test_nested_inside_ignored(self, state):
        state.push("nav")
        state.push("ul")
        state.push("li")
        assert state.is_in_ignored()

    @pytest.mark.parametrize("keeper", ["pre", "title"])
    def test_pre_and_title_reenable_output(self, state, keeper):
        state.push("nav")
        state.push(keeper)
        assert not state.is_in_ignored()

    def test_pre_outside_ignored_element_also_wins(self, state):
        state.push("pre")
        state.push("script")
        assert not state.is_in_ignored()

    def test_depth_limits_check_to_ancestors(self, state):
        state.push("ul")
        state.push("li")
        state.push("nav")
        assert state.is_in_ignored()
        assert not state.is_in_ignored(state.find_open("ul"))
        assert state.is_in_ignored(state.find_open("nav"))

    def test_depth_below_ignored_ancestor(self, state):
        state.push("nav")
        state.push("ul")
        assert state.is_in_ignored(state.find_open("ul"))

    def test_stack_entry_flag(self):
        assert StackEntry("style").is_ignored
        assert StackEntry("div", hidden=True).is_ignored
        assert not StackEntry("div").is_ignored


@pytest.mark.unit
class TestBlockquotePrefix:
    """Tests for the quote marker prefix."""

    @pytest.mark.parametrize("depth,expected", [(0, ""), (1, "> "), (3, "> > > "), (-1, "")])
    def test_prefix(self, depth, expected):
        state = ConversionState(blockquote_depth=depth)
        assert state.blockquote_prefix() == expected
