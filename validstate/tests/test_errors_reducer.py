"""
Tests for the pass-through error slot reducer.
"""

from validstate.core import errors_reducer


def test_initial_call_returns_empty_report():
    """Initial call must declare an empty error slot."""
    assert errors_reducer() == {}
    assert errors_reducer(None, {"type": "INIT"}) == {}


def test_existing_value_is_returned_unchanged():
    """Existing slot value must pass through untouched."""
    report = {"dog": {"age": "Dog Age is required"}}

    assert errors_reducer(report, {"type": "UPDATE_DOG_AGE", "payload": "1"}) is report
