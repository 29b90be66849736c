"""Tests for schema models."""

import pytest
from pydantic import ValidationError

from flowline.schema.models import (
    State,
    StateMachine,
    StyleRuleSpec,
    StyleTableSpec,
    Transition,
)


class TestTransition:
    def test_shorthand_target(self):
        assert Transition.model_validate("Finish").target == "Finish"

    def test_full_form(self):
        transition = Transition.model_validate(
            {"target": "Scene 6", "description": "Make friends with the guy"}
        )
        assert transition.description == "Make friends with the guy"

    def test_target_required(self):
        with pytest.raises(ValidationError):
            Transition.model_validate({"description": "nowhere"})


class TestState:
    def test_defaults(self):
        state = State()
        assert state.tags == []
        assert state.type is None
        assert state.on == {}

    def test_single_tag(self):
        assert State(tags="Core").tags == ["Core"]

    def test_null_tags_and_on(self):
        state = State.model_validate({"tags": None, "on": None})
        assert state.tags == []
        assert state.on == {}

    def test_yaml_boolean_on_key(self):
        state = State.model_validate({True: {"GO": "Finish"}})
        assert state.on["GO"].target == "Finish"

    def test_extra_fields_allowed(self):
        state = State.model_validate({"entry": ["log"], "type": "final"})
        assert state.type == "final"
        assert state.model_extra == {"entry": ["log"]}


class TestStateMachine:
    def test_id_required(self):
        with pytest.raises(ValidationError):
            StateMachine.model_validate({"states": {}})

    def test_states_without_body(self):
        machine = StateMachine.model_validate({"id": "M", "states": {"A": None}})
        assert machine.get_state("A") == State()

    def test_input_not_mutated(self):
        data = {"id": "M", "states": {"A": None}}
        StateMachine.model_validate(data)
        assert data["states"]["A"] is None

    def test_scalar_tag(self):
        machine = StateMachine.model_validate({"id": "M", "tags": "curve:basis"})
        assert machine.tags == ["curve:basis"]

    def test_get_state_missing(self):
        assert StateMachine(id="M").get_state("A") is None

    def test_state_order_preserved(self):
        machine = StateMachine.model_validate(
            {"id": "M", "states": {"C": {}, "A": {}, "B": {}}}
        )
        assert machine.get_all_state_names() == ["C", "A", "B"]


class TestStyleRuleSpec:
    def test_hyphenated_aliases(self):
        rule = StyleRuleSpec.model_validate(
            {"stroke-width": "2px", "stroke-dasharray": "5 5"}
        )
        assert rule.stroke_width == "2px"
        assert rule.stroke_dash == "5 5"

    def test_field_names_accepted(self):
        assert StyleRuleSpec(stroke_width="4px").stroke_width == "4px"

    def test_default_shape(self):
        assert StyleRuleSpec().shape == "default"

    def test_invalid_shape(self):
        with pytest.raises(ValidationError) as exc_info:
            StyleRuleSpec(shape="blob")
        assert "not a valid node shape" in str(exc_info.value)


class TestStyleTableSpec:
    def test_extends_known_base(self):
        spec = StyleTableSpec.model_validate(
            {"base": {"dark": {"fill": "black"}}, "rules": {"Core": {"extends": "dark"}}}
        )
        assert spec.rules["Core"].extends == "dark"

    def test_extends_unknown_base(self):
        with pytest.raises(ValidationError) as exc_info:
            StyleTableSpec.model_validate({"rules": {"Core": {"extends": "dark"}}})
        assert "undefined base class 'dark'" in str(exc_info.value)
