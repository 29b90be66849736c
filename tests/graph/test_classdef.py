"""Tests for ClassDef and LinkDef."""

import pytest

from flowline.graph.classdef import ClassDef, LinkDef, is_node_style


class TestClassDef:
    def test_requires_string_name(self):
        with pytest.raises(TypeError):
            ClassDef(None)

    def test_fill_only(self):
        class_def = ClassDef("box").fill("#f9f")
        assert class_def.render() == "classDef box fill:#f9f"

    def test_all_properties_in_fixed_order(self):
        class_def = (
            ClassDef("full")
            .stroke_dash("5 5")
            .stroke_width("2px")
            .stroke("red")
            .fill("black")
            .color("white")
        )
        assert class_def.declarations() == [
            "color:white",
            "fill:black",
            "stroke:red",
            "stroke-width:2px",
            "stroke-dasharray:5 5",
        ]

    def test_setter_without_value_clears(self):
        class_def = ClassDef("box").fill("red").stroke("blue").fill()
        assert class_def.style["fill"] is None
        assert class_def.render() == "classDef box stroke:blue"

    def test_style_is_a_copy(self):
        class_def = ClassDef("box").fill("red")
        class_def.style["fill"] = "blue"
        assert class_def.style["fill"] == "red"


class TestClassDefCopy:
    def test_copy_with_name(self):
        base = ClassDef("base").fill("black").color("white")
        copy = ClassDef.copy_of(base, "core").stroke("blue")

        assert copy.name == "core"
        assert copy.render() == "classDef core color:white,fill:black,stroke:blue"
        assert base.style["stroke"] is None

    def test_copy_generates_name(self):
        first = ClassDef.copy_of(ClassDef("base"))
        second = ClassDef.copy_of(ClassDef("base"))

        assert first.name.startswith("class")
        assert first.name != second.name

    def test_copy_requires_classdef(self):
        with pytest.raises(TypeError):
            ClassDef.copy_of({"fill": "red"})


class TestLinkDef:
    def test_default_render(self):
        link = LinkDef().stroke("white").stroke_dash("5 5")
        assert link.render() == "linkStyle default stroke:white,stroke-dasharray:5 5"

    def test_indexed_render(self):
        link = LinkDef().stroke("red")
        assert link.render([0, 3]) == "linkStyle 0,3 stroke:red"

    def test_generated_names_are_unique(self):
        assert LinkDef().name != LinkDef().name

    def test_copy_requires_linkdef(self):
        with pytest.raises(TypeError):
            LinkDef.copy_of(ClassDef("node-style"))

    def test_copy_is_independent(self):
        link = LinkDef().stroke("red")
        copy = LinkDef.copy_of(link)
        link.stroke("blue")

        assert isinstance(copy, LinkDef)
        assert copy.style["stroke"] == "red"


class TestIsNodeStyle:
    def test_classdef_is_node_style(self):
        assert is_node_style(ClassDef("box"))

    def test_linkdef_is_not_node_style(self):
        assert not is_node_style(LinkDef())
        assert not is_node_style("classDef box fill:red")
