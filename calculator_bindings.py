"""Traducción de teclas y botones a operaciones del motor.

Todo lo que la ventana necesita decidir sin tocar widgets vive aquí:
la tabla de teclado, el despacho de acciones, la línea de pista con la
operación pendiente, la etiqueta C/AC y el tamaño de letra del display.
"""

from loguru import logger

from calculator_engine import CalculatorEngine, CalculatorState, Operator
from number_formatter import format_number


# ── Definiciones del teclado principal ──────────────────────────
#  Cada fila es una lista de (texto, acción, tipo_color)
#  tipo_color: "num", "op", "func", "equals"
#  La etiqueta de "clear" se sustituye por C o AC según el estado.

KEYPAD = [
    [("AC", "clear", "func"), ("±", "sign", "func"),
     ("%", "percent", "func"), ("÷", "operator:÷", "op")],

    [("7", "digit:7", "num"), ("8", "digit:8", "num"),
     ("9", "digit:9", "num"), ("×", "operator:×", "op")],

    [("4", "digit:4", "num"), ("5", "digit:5", "num"),
     ("6", "digit:6", "num"), ("−", "operator:−", "op")],

    [("1", "digit:1", "num"), ("2", "digit:2", "num"),
     ("3", "digit:3", "num"), ("+", "operator:+", "op")],

    [("0", "digit:0", "num"), (",", "dot", "num"),
     ("=", "equals", "equals")],
]

_CHAR_ACTIONS = {
    ".": "dot",
    ",": "dot",
    "+": "operator:+",
    "-": "operator:−",
    "*": "operator:×",
    "/": "operator:÷",
    "=": "equals",
    "%": "percent",
}

_KEYSYM_ACTIONS = {
    "Return": "equals",
    "KP_Enter": "equals",
    "Enter": "equals",
    "Escape": "clear_all",
    "BackSpace": "clear_entry",
    "Backspace": "clear_entry",
    "KP_Add": "operator:+",
    "KP_Subtract": "operator:−",
    "KP_Multiply": "operator:×",
    "KP_Divide": "operator:÷",
    "KP_Decimal": "dot",
}

# (longitud máxima, tamaño en píxeles)
_FONT_STEPS = [(6, 64), (8, 52), (10, 44), (12, 36), (14, 30)]
_FONT_MIN = 26


def action_for_key(char: str, keysym: str = "") -> str | None:
    """Devuelve la acción de una pulsación de teclado o None."""
    if keysym in _KEYSYM_ACTIONS:
        return _KEYSYM_ACTIONS[keysym]
    if len(char) == 1 and char in "0123456789":
        return f"digit:{char}"
    return _CHAR_ACTIONS.get(char)


def dispatch(engine: CalculatorEngine, action: str) -> CalculatorState:
    """Ejecuta la acción sobre el motor; las acciones desconocidas se ignoran."""
    if action.startswith("digit:"):
        return engine.input_digit(action[6:])
    if action.startswith("operator:"):
        return engine.set_operator(action[9:])

    handler = {
        "dot": engine.input_dot,
        "sign": engine.toggle_sign,
        "percent": engine.percent,
        "equals": engine.evaluate,
        "clear": engine.clear,
        "clear_all": engine.clear_all,
        "clear_entry": engine.clear_entry,
    }.get(action)
    if handler is None:
        logger.debug("Acción desconocida: {!r}", action)
        return engine.state
    return handler()


def hint_text(state: CalculatorState) -> str:
    if not state.has_pending:
        return ""
    return f"{format_number(state.pending_operand)} {state.pending_operator.value}"


def clear_label(state: CalculatorState) -> str:
    return "C" if state.can_clear_entry else "AC"


def is_operator_active(state: CalculatorState, op) -> bool:
    """El operador elegido se resalta hasta que se teclea el segundo operando."""
    operator = Operator.parse(op)
    return (
        operator is not None
        and state.pending_operator is operator
        and not state.is_typing
    )


def display_font_size(text: str) -> int:
    length = len(text) if text else 1
    for limit, size in _FONT_STEPS:
        if length <= limit:
            return size
    return _FONT_MIN
