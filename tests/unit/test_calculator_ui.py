"""Checks for the tkinter window that run without a display."""

import pytest

pytest.importorskip("tkinter")

from calculator_engine import CalculatorEngine  # noqa: E402
from calculator_ui import CalculatorApp  # noqa: E402
from number_formatter import ERROR_TOKEN  # noqa: E402


class _FakeVar:
    def __init__(self):
        self.v = ""

    def set(self, x):
        self.v = x

    def get(self):
        return self.v


class _FakeFont:
    def __init__(self):
        self.size = None

    def configure(self, **kw):
        self.size = kw.get("size", self.size)


class _FakeButton:
    def __init__(self):
        self.options = {}

    def config(self, **kw):
        self.options.update(kw)


class _FakeEvent:
    def __init__(self, char, keysym):
        self.char = char
        self.keysym = keysym


class _DummyCalculatorApp(CalculatorApp):
    def __init__(self):
        pass


@pytest.fixture
def app():
    app = _DummyCalculatorApp()
    app.engine = CalculatorEngine()
    app.value_var = _FakeVar()
    app.hint_var = _FakeVar()
    app._f_value = _FakeFont()
    app._clear_button = _FakeButton()
    app._operator_buttons = {symbol: _FakeButton() for symbol in "+−×÷"}
    app._refresh()
    return app


def _type(app, keys):
    for char in keys:
        app._on_keypress(_FakeEvent(char, char))


class TestRefresh:
    def test_initial_display(self, app):
        assert app.value_var.get() == "0"
        assert app.hint_var.get() == ""
        assert app._clear_button.options["text"] == "AC"
        assert app._f_value.size == -64

    def test_pending_operation_is_shown(self, app):
        _type(app, "12+")
        assert app.value_var.get() == "12"
        assert app.hint_var.get() == "12 +"
        assert app._operator_buttons["+"].options["bg"] == CalculatorApp.C["op_active"]
        assert app._operator_buttons["×"].options["bg"] == CalculatorApp.C["op"]

    def test_result_after_equals(self, app):
        _type(app, "12+30=")
        assert app.value_var.get() == "42"
        assert app.hint_var.get() == ""
        assert app._clear_button.options["text"] == "C"

    def test_long_value_shrinks_font(self, app):
        _type(app, "12345678901")
        assert app._f_value.size == -36


class TestKeyboard:
    def test_handled_key_stops_propagation(self, app):
        assert app._on_keypress(_FakeEvent("5", "5")) == "break"

    def test_unhandled_key_is_passed_on(self, app):
        assert app._on_keypress(_FakeEvent("q", "q")) is None
        assert app.value_var.get() == "0"

    def test_escape_clears_everything(self, app):
        _type(app, "7/0=")
        assert app.value_var.get() == ERROR_TOKEN
        app._on_keypress(_FakeEvent("\x1b", "Escape"))
        assert app.value_var.get() == "0"
        assert app._clear_button.options["text"] == "AC"

    def test_clear_button_uses_entry_then_all(self, app):
        _type(app, "9*8")
        app._on_key("clear")
        assert app.value_var.get() == "0"
        assert app.hint_var.get() == "9 ×"
        app._on_key("clear")
        assert app.hint_var.get() == ""


class TestComputeSpans:
    def test_short_row_gives_extra_column_to_first_key(self):
        assert CalculatorApp._compute_spans(3, 4) == [2, 1, 1]

    def test_full_row(self):
        assert CalculatorApp._compute_spans(4, 4) == [1, 1, 1, 1]
