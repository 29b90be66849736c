"""Tests for Connection."""

import itertools

import pytest

from flowline.graph.classdef import ClassDef, LinkDef
from flowline.graph.connection import Connection, Endpoint
from flowline.graph.errors import IncompleteConnectionError, InvalidChoiceError
from flowline.graph.node import ChartNode
from flowline.graph.options import ArrowStyle, LineStyle


class TestConnectionConstruction:
    def test_default_depth(self):
        assert Connection().depth == 0

    @pytest.mark.parametrize("depth", [1.5, "2", None, True, -1])
    def test_invalid_depth(self, depth):
        with pytest.raises(ValueError):
            Connection(depth)

    def test_endpoint_requires_node(self):
        with pytest.raises(TypeError):
            Connection().from_("A")

    def test_invalid_arrow_style(self, start_node):
        with pytest.raises(InvalidChoiceError):
            Connection().from_(start_node, True, "diamond")

    def test_invalid_line_style(self):
        with pytest.raises(InvalidChoiceError):
            Connection().style("wavy")

    def test_nodes(self, start_node, end_node):
        connection = Connection().from_(start_node).to(end_node)
        assert connection.nodes == [start_node, end_node]

    def test_endpoint_normalizes_arrow_style(self, start_node):
        endpoint = Endpoint(start_node, True, "round")
        assert endpoint.arrow_style is ArrowStyle.ROUND


class TestConnectionRender:
    def test_arrow_to_target(self, start_node, end_node):
        connection = Connection().from_(start_node).to(end_node, True)
        assert connection.render() == "A[Start] --> B[End]"

    def test_open_link(self, start_node, end_node):
        connection = Connection().from_(start_node).to(end_node)
        assert connection.render() == "A[Start] --- B[End]"

    def test_arrows_on_both_ends(self, start_node, end_node):
        connection = Connection().from_(start_node, True).to(end_node, True)
        assert connection.render() == "A[Start]<--> B[End]"

    def test_round_and_cross_heads(self, start_node, end_node):
        connection = (
            Connection()
            .from_(start_node, True, "round")
            .to(end_node, True, "cross")
        )
        assert connection.render() == "A[Start]o--x B[End]"

    def test_label(self, start_node, end_node):
        connection = Connection().from_(start_node).to(end_node, True).text("go")
        assert connection.render() == "A[Start] -->|go| B[End]"

    def test_depth_lengthens_line(self, start_node, end_node):
        connection = Connection(2).from_(start_node).to(end_node)
        assert connection.render() == "A[Start] ----- B[End]"

    def test_thick(self, start_node, end_node):
        connection = Connection().from_(start_node).to(end_node, True).style("thick")
        assert connection.render() == "A[Start] ==> B[End]"

    def test_dotted(self, start_node, end_node):
        connection = Connection().from_(start_node).to(end_node, True).style("dotted")
        assert connection.render() == "A[Start] -.-> B[End]"

    def test_style_without_value_resets(self, start_node, end_node):
        connection = Connection().from_(start_node).to(end_node).style("thick").style()
        assert connection.line_style is LineStyle.DEFAULT

    def test_incomplete_connection(self, start_node):
        with pytest.raises(IncompleteConnectionError):
            Connection().from_(start_node).render()

    def test_shared_node_declared_once(self, start_node, end_node):
        other = ChartNode("C").text("Other")
        first = Connection().from_(start_node).to(end_node, True)
        second = Connection().from_(start_node).to(other, True)

        assert first.render() == "A[Start] --> B[End]"
        assert second.render() == "A --> C[Other]"

    @pytest.mark.parametrize(
        "depth, source_arrow, target_arrow",
        list(itertools.product(range(6), [False, True], [False, True])),
    )
    def test_dotted_length_is_odd(self, depth, source_arrow, target_arrow):
        connection = (
            Connection(depth)
            .from_(ChartNode("a"), source_arrow)
            .to(ChartNode("b"), target_arrow)
            .style("dotted")
        )
        assert connection.line_length() % 2 == 1


class TestConnectionClass:
    def test_class_is_copied(self):
        link = LinkDef().stroke("red")
        connection = Connection().class_(link)
        link.stroke("blue")

        assert connection.link_class is not link
        assert connection.link_class.style["stroke"] == "red"

    def test_class_requires_linkdef(self):
        with pytest.raises(TypeError):
            Connection().class_(ClassDef("node-style"))

    def test_class_clears(self):
        connection = Connection().class_(LinkDef().stroke("red")).class_()
        assert connection.link_class is None
