"""Tests for the edge compiler and carry-over resolution."""

import pytest

from vertextual.constants import DEFAULT_CONNECTIONS
from vertextual.parser import (
    CarryOver,
    EdgeCompiler,
    SelfLoopPolicy,
    SkipReason,
    compile_edges,
    tokenize_line,
)
from vertextual.parser.models import Edge


class TestCarryOver:
    """Tests for resolving omitted endpoints."""

    def test_registers_start_absent(self):
        """Nothing can be carried before the first resolved line."""
        carry = CarryOver()
        assert carry.last_origin is None
        assert carry.last_destination is None
        assert carry.resolve(tokenize_line("^ X")) is None
        assert carry.resolve(tokenize_line("> X")) is None

    def test_resolved_line_advances_registers(self):
        """Both registers follow the last resolved edge."""
        carry = CarryOver()
        assert carry.resolve(tokenize_line("A > B")) == Edge("A", "B")
        assert carry.last_origin == "A"
        assert carry.last_destination == "B"

    def test_unresolved_line_keeps_registers(self):
        """A line that cannot resolve leaves the registers alone."""
        carry = CarryOver()
        carry.resolve(tokenize_line("A > B"))
        assert carry.resolve(tokenize_line("^")) is None
        assert carry.last_origin == "A"
        assert carry.last_destination == "B"

    def test_missing_destination_uses_written_origin(self):
        """The self-reference fill happens before the origin is carried."""
        carry = CarryOver()
        carry.resolve(tokenize_line("A > B"))
        # Destination copies the (absent) origin first, then the origin is carried
        assert carry.resolve(tokenize_line(">")) is None
        assert carry.last_origin == "A"
        assert carry.last_destination == "B"


class TestEdgeCompiler:
    """Tests for complete compilations."""

    def test_next_operator_carries_destination(self, compiler):
        """'>' without an origin continues from the last destination."""
        expected = [("A", "B"), ("B", "C"), ("C", "D")]
        assert compiler.compile("A > B\n> C\n> D") == expected
        assert compiler.compile("A > B\nB > C\nC > D") == expected

    def test_sibling_operator_carries_origin(self, compiler):
        """'^' without an origin reuses the last origin."""
        expected = [("A", "B"), ("A", "C"), ("A", "D")]
        assert compiler.compile("A > B\n^ C\n^ D") == expected
        assert compiler.compile("A > B\nA > C\nA > D") == expected

    def test_bare_origin_is_self_loop(self, compiler):
        """'A >' reads as 'A > A'."""
        assert compiler.compile("A >") == [("A", "A")]

    def test_explicit_self_loop_is_kept(self, compiler):
        """Self-loops survive under the default policy."""
        assert compiler.compile("A > A") == [("A", "A")]

    def test_duplicates_are_removed(self, compiler):
        """Only the first occurrence of an edge is kept."""
        assert compiler.compile("A > B\nA > B") == [("A", "B")]

    def test_first_occurrence_order_is_kept(self, compiler):
        """Deduplication preserves the position of the first occurrence."""
        text = "A > B\nC > D\nA > B\nE > F\nC > D"
        assert compiler.compile(text) == [("A", "B"), ("C", "D"), ("E", "F")]

    def test_duplicate_line_still_advances_state(self, compiler):
        """A repeated edge resolves, so later lines carry from it."""
        assert compiler.compile("A > B\nB > C\nA > B\n> D") == [
            ("A", "B"), ("B", "C"), ("B", "D"),
        ]
        assert compiler.compile("A > B\nC > D\nA > B\n^ E") == [
            ("A", "B"), ("C", "D"), ("A", "E"),
        ]

    def test_reversed_edges_are_distinct(self, compiler):
        """An edge and its reverse are both kept."""
        assert compiler.compile("A > B\n> A") == [("A", "B"), ("B", "A")]

    def test_malformed_line_is_ignored(self, compiler):
        """A line without an operator neither fails nor sets state."""
        assert compiler.compile("garbage no operator\nA > B") == [("A", "B")]
        assert compiler.compile("garbage no operator\n^ C") == []

    def test_blank_lines_are_neutral(self, compiler):
        """Blank lines do not disturb carry-over."""
        assert compiler.compile("A > B\n\n> C") == [("A", "B"), ("B", "C")]
        assert compiler.compile("A > B\n\n\n^ C") == [("A", "B"), ("A", "C")]

    def test_unresolvable_first_line(self, compiler):
        """A first line with nothing to carry is dropped."""
        assert compiler.compile("^ X") == []
        assert compiler.compile("> X") == []

    def test_unresolved_line_does_not_advance_state(self, compiler):
        """An operator on its own resolves nothing and changes nothing."""
        assert compiler.compile("A > B\n>\n> C") == [("A", "B"), ("B", "C")]
        assert compiler.compile("A > B\n>\n^ C") == [("A", "B"), ("A", "C")]

    def test_sibling_after_self_loop(self, compiler):
        """A bare origin line becomes the new carried origin."""
        assert compiler.compile("A > B\nB >\n^ C") == [("A", "B"), ("B", "B"), ("B", "C")]

    def test_empty_text(self, compiler):
        """Empty text compiles to no edges."""
        assert compiler.compile("") == []
        assert compiler.compile("\n\n") == []

    def test_crlf_matches_lf(self, compiler):
        """Windows line endings compile like Unix ones."""
        assert compiler.compile("A > B\r\n> C\r\n^ D") == compiler.compile("A > B\n> C\n^ D")

    def test_node_names_are_trimmed(self, compiler):
        """Names match after trimming surrounding whitespace."""
        assert compiler.compile("  A   >  B  \nA > B") == [("A", "B")]

    def test_deterministic(self, compiler, workflow_text):
        """Repeated compilation gives the same result."""
        assert compiler.compile(workflow_text) == compiler.compile(workflow_text)

    def test_no_state_between_calls(self, compiler):
        """Each compilation starts with empty registers."""
        compiler.compile("A > B")
        assert compiler.compile("^ C") == []

    def test_workflow(self, compiler, workflow_text):
        """Every rule combined."""
        assert compiler.compile(workflow_text) == [
            ("Daydream", "Idea"),
            ("Idea", "Sketch"),
            ("Idea", "Doodle"),
            ("Doodle", "Sketch"),
            ("Sketch", "Daydream"),
        ]

    def test_default_example(self, compiler):
        """The built-in example compiles to the documented network."""
        edges = compiler.compile(DEFAULT_CONNECTIONS)
        assert edges == [
            ("Daydream", "Daydream"),
            ("Daydream", "Idea"),
            ("Idea", "Sketch"),
            ("Sketch", "Prototype"),
            ("Prototype", "Test"),
            ("Test", "Evaluate"),
            ("Evaluate", "Refine"),
            ("Refine", "Sketch"),
            ("Refine", "Polish"),
            ("Polish", "Refine"),
            ("Polish", "Ship it!"),
            ("Ship it!", "Daydream"),
        ]

    def test_edges_have_named_fields(self, compiler):
        """Edges expose source and target."""
        edge = compiler.compile("A > B")[0]
        assert edge.source == "A"
        assert edge.target == "B"
        assert not edge.is_self_loop
        assert str(edge) == "A > B"

    def test_non_text_input_is_rejected(self, compiler):
        """Only strings can be compiled."""
        with pytest.raises(TypeError):
            compiler.compile(None)


class TestSelfLoopPolicy:
    """Tests for the self-loop policy switch."""

    def test_default_policy_keeps(self):
        """Self-loops are kept unless asked otherwise."""
        assert EdgeCompiler().self_loops == SelfLoopPolicy.KEEP

    def test_policy_from_string(self):
        """The policy can be given by name."""
        assert EdgeCompiler("drop").self_loops == SelfLoopPolicy.DROP

    def test_unknown_policy(self):
        """Unknown policy names are rejected."""
        with pytest.raises(ValueError):
            EdgeCompiler("sometimes")

    def test_drop_removes_self_loops(self, dropping_compiler):
        """Dropped self-loops leave the other edges untouched."""
        assert dropping_compiler.compile("A > A\nA > B") == [("A", "B")]
        assert dropping_compiler.compile("A >") == []

    def test_drop_keeps_carry_over(self, dropping_compiler):
        """A dropped self-loop still feeds the next line."""
        assert dropping_compiler.compile("X > Y\nA > A\n> B") == [("X", "Y"), ("A", "B")]
        assert dropping_compiler.compile("X > Y\nA > A\n^ B") == [("X", "Y"), ("A", "B")]

    def test_default_example_without_self_loops(self, dropping_compiler):
        """Only the opening self-loop disappears from the example."""
        edges = dropping_compiler.compile(DEFAULT_CONNECTIONS)
        assert len(edges) == 11
        assert ("Daydream", "Daydream") not in edges


class TestCompileReport:
    """Tests for compile reports."""

    def test_skipped_lines_are_recorded(self, compiler):
        """Each skipped line carries its line number and reason."""
        result = compiler.compile_with_report("nope\n^ X\nA > B\n\nA > B")
        assert result.edges == [("A", "B")]
        assert [(line.line_number, line.reason) for line in result.skipped] == [
            (1, SkipReason.MALFORMED),
            (2, SkipReason.UNRESOLVED),
            (5, SkipReason.DUPLICATE),
        ]

    def test_self_loops_reported_when_dropped(self, dropping_compiler):
        """Removed self-loops are reported."""
        result = dropping_compiler.compile_with_report("A > A\nA > B")
        assert result.skipped_by_reason(SkipReason.SELF_LOOP)[0].text == "A > A"

    def test_nodes_in_first_appearance_order(self, compiler, workflow_text):
        """Nodes are listed once, in order of appearance."""
        result = compiler.compile_with_report(workflow_text)
        assert result.nodes == ["Daydream", "Idea", "Sketch", "Doodle"]

    def test_compile_edges_wrapper(self):
        """The module-level helper compiles with a fresh compiler."""
        assert compile_edges("A > A\n> B") == [("A", "A"), ("A", "B")]
        assert compile_edges("A > A\n> B", self_loops="drop") == [("A", "B")]
