"""
Tests for reducer decoration.

Critical: the decorated reducer must match the raw reducer on every field
except the error key, and the report must always be freshly computed.
"""

import copy

import pytest

from validstate.core import ValidateOptions, validate_reducer
from validstate.core.state import omit
from validstate.tests.example_app import (
    INITIAL_STATE,
    reducer,
    root_reducer,
    update_dog_age,
    validate,
)


def test_validates_initial_call_with_no_state():
    """Initial call with no state must be validated."""
    validated = validate_reducer(validate)(reducer)
    result = validated()

    assert result == {
        **INITIAL_STATE,
        "errors": {
            "dog": {
                "name": "Dog Name is required",
                "age": "Dog Age is required",
            },
        },
    }


def test_validates_call_with_existing_state():
    """Call with existing state must be validated."""
    validated = validate_reducer(validate)(reducer)
    state = {"favoriteMeme": "123", "dog": {"name": "", "age": ""}}

    result = validated(state)

    assert result == {
        **state,
        "errors": {
            "favoriteMeme": "Favorite Meme must be alphabetic",
            "dog": {
                "name": "Dog Name is required",
                "age": "Dog Age is required",
            },
        },
    }


def test_valid_properties_produce_empty_nested_report():
    """Valid state must produce an empty nested report."""
    validated = validate_reducer(validate)(reducer)
    state = {"favoriteMeme": "Doge", "dog": {"name": "Tucker", "age": "10"}}

    result = validated(state)

    assert result == {**state, "errors": {"dog": {}}}


def test_some_properties_valid_some_not():
    """Only invalid properties must carry messages."""
    validated = validate_reducer(validate)(reducer)
    state = {"favoriteMeme": "Doge", "dog": {"name": "Tucker", "age": "abc"}}

    result = validated(state)

    assert result == {**state, "errors": {"dog": {"age": "Dog Age must be numeric"}}}


def test_custom_error_key():
    """Custom error key must replace the default one."""
    validated = validate_reducer(validate, ValidateOptions(error_key="myErrors"))(reducer)
    state = {"favoriteMeme": "123", "dog": {"name": "", "age": ""}}

    result = validated(state)

    assert "errors" not in result
    assert result["myErrors"] == {
        "favoriteMeme": "Favorite Meme must be alphabetic",
        "dog": {
            "name": "Dog Name is required",
            "age": "Dog Age is required",
        },
    }


@pytest.mark.parametrize("options", [{"error_key": "myErrors"}, {"errorKey": "myErrors"}])
def test_custom_error_key_from_mapping(options):
    """Options mapping must accept both key spellings."""
    validated = validate_reducer(validate, options)(reducer)

    assert "myErrors" in validated()


def test_default_key_matches_explicit_errors_key():
    """Omitted options must behave like error_key="errors"."""
    state = {"favoriteMeme": "1", "dog": {"name": "Rex", "age": ""}}

    implicit = validate_reducer(validate)(reducer)(state)
    explicit = validate_reducer(validate, ValidateOptions(error_key="errors"))(reducer)(state)

    assert implicit == explicit


def test_preloaded_state_used_when_state_missing():
    """Preloaded state must stand in for a missing state."""
    preloaded = {"favoriteMeme": "Doge", "dog": {"name": "Tucker", "age": "abc"}}
    validated = validate_reducer(validate)(reducer, preloaded)

    result = validated()

    assert result == {**preloaded, "errors": {"dog": {"age": "Dog Age must be numeric"}}}
    assert validated(None, {"type": "ANY"}) == validated(preloaded, {"type": "ANY"})


def test_passthrough_except_error_key():
    """Result must equal the raw reducer except for the error key."""
    validated = validate_reducer(validate)(root_reducer)
    state = {"favoriteMeme": "Doge", "dog": {"name": "Tucker", "age": ""}}
    action = update_dog_age("7")

    raw = root_reducer(state, action)
    result = validated(state, action)

    assert omit(result, "errors") == raw


def test_unknown_action_passes_through():
    """Unknown actions must leave state unchanged."""
    validated = validate_reducer(validate)(root_reducer)
    state = {"favoriteMeme": "Doge", "dog": {"name": "Tucker", "age": "3"}}

    result = validated(state, {"type": "SOMETHING_ELSE"})

    assert omit(result, "errors") == state


def test_stale_report_is_replaced_and_never_validated():
    """Stale report must be stripped before validation."""
    seen = []

    def recording_validate(values):
        seen.append(values)
        return validate(values)

    validated = validate_reducer(recording_validate)(reducer)
    state = {
        "favoriteMeme": "Doge",
        "dog": {"name": "Tucker", "age": "10"},
        "errors": {"dog": {"name": "stale"}},
    }

    result = validated(state)

    assert "errors" not in seen[0]
    assert result["errors"] == {"dog": {}}


def test_revalidating_validated_state_is_idempotent():
    """Validating a validated state must yield the same state."""
    validated = validate_reducer(validate)(reducer)
    state = {"favoriteMeme": "1", "dog": {"name": "", "age": "x"}}

    once = validated(state)
    twice = validated(once)

    assert twice == once


def test_error_key_collision_validation_wins():
    """Report must overwrite a reducer-managed error key."""
    def reducer_with_errors(state=None, action=None):
        return {"value": 1, "errors": "managed by reducer"}

    validated = validate_reducer(lambda values: {"checked": sorted(values)})(reducer_with_errors)

    assert validated() == {"value": 1, "errors": {"checked": ["value"]}}


def test_does_not_mutate_inputs():
    """Decorated reducer must not mutate state or action."""
    validated = validate_reducer(validate)(root_reducer)
    state = {"favoriteMeme": "Doge", "dog": {"name": "Tucker", "age": ""}, "errors": {}}
    action = update_dog_age("4")
    state_before = copy.deepcopy(state)
    action_before = copy.deepcopy(action)

    result = validated(state, action)

    assert state == state_before
    assert action == action_before
    assert result is not state


def test_decorating_twice_yields_independent_reducers():
    """Two decorations must share no state."""
    decorate = validate_reducer(validate)
    first = decorate(reducer)
    second = decorate(reducer, {"favoriteMeme": "Doge", "dog": {"name": "A", "age": "1"}})

    assert first is not second
    assert first()["errors"]["dog"] != second()["errors"]["dog"]


def test_validator_fault_propagates():
    """Validator exceptions must propagate unchanged."""
    def broken(values):
        raise RuntimeError("validator exploded")

    validated = validate_reducer(broken)(reducer)

    with pytest.raises(RuntimeError, match="validator exploded"):
        validated()


def test_non_callable_validator_raises_type_error_on_call():
    """Non-callable validator must fail with TypeError on call."""
    validated = validate_reducer(None)(reducer)

    with pytest.raises(TypeError):
        validated()


def test_non_mapping_result_raises_type_error():
    """Non-mapping reducer result must fail with TypeError."""
    validated = validate_reducer(validate)(lambda state, action: 42)

    with pytest.raises(TypeError):
        validated()
