"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def engine():
    """Provide a fresh CalculatorEngine."""
    from calculator_engine import CalculatorEngine

    return CalculatorEngine()


@pytest.fixture
def press(engine):
    """Press keypad actions in order, e.g. press("digit:5", "operator:+")."""
    from calculator_bindings import dispatch

    def _press(*actions):
        for action in actions:
            dispatch(engine, action)
        return engine.state

    return _press
