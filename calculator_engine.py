"""
Motor de cálculo de la calculadora de bolsillo.

Este módulo provee la clase CalculatorEngine, una máquina de estados
que acumula el número tecleado, el operando y el operador pendientes,
y encadena operaciones binarias estrictamente de izquierda a derecha.
La interfaz gráfica sólo lee el estado y llama a las operaciones.

Contrato de interfaz:
    - input_digit(d), input_dot(), toggle_sign(), percent()
    - set_operator(op), evaluate()
    - clear_all(), clear_entry(), clear()
    - state: CalculatorState (sólo lectura para la interfaz)

Ninguna operación lanza excepciones: una división por cero o un
desbordamiento se muestran como ERROR_TOKEN.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from loguru import logger

from calculator_entry import Entry


class Operator(str, enum.Enum):
    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @classmethod
    def parse(cls, value) -> Operator | None:
        """Devuelve el operador o None si el símbolo no es válido."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None


class Phase(enum.Enum):
    IDLE = "idle"
    TYPING_FIRST = "typing_first"
    OPERATOR_SELECTED = "operator_selected"
    TYPING_SECOND = "typing_second"
    JUST_EVALUATED = "just_evaluated"
    ERROR = "error"


TYPING_PHASES = frozenset({Phase.TYPING_FIRST, Phase.TYPING_SECOND})


def compute(a: float, b: float, op: Operator) -> float:
    """Aplica `op` con aritmética IEEE; dividir por cero da ±inf."""
    if op is Operator.ADD:
        return a + b
    if op is Operator.SUBTRACT:
        return a - b
    if op is Operator.MULTIPLY:
        return a * b
    if op is Operator.DIVIDE:
        if b == 0:
            if a == 0 or math.isnan(a):
                return math.nan
            return math.copysign(math.inf, a) * math.copysign(1.0, b)
        return a / b
    return b


@dataclass
class CalculatorState:
    """Estado completo de una sesión de la calculadora."""

    entry: Entry = field(default_factory=Entry.zero)
    pending_operand: float | None = None
    pending_operator: Operator | None = None
    phase: Phase = Phase.IDLE

    @property
    def current_entry(self) -> str:
        return self.entry.text

    @property
    def has_pending(self) -> bool:
        return self.pending_operator is not None

    @property
    def is_typing(self) -> bool:
        return self.phase in TYPING_PHASES

    @property
    def just_evaluated(self) -> bool:
        return self.phase is Phase.JUST_EVALUATED

    @property
    def is_error(self) -> bool:
        return self.phase is Phase.ERROR

    @property
    def can_clear_entry(self) -> bool:
        return self.is_typing or not self.entry.is_zero


class CalculatorEngine:
    """Máquina de estados de una calculadora de cuatro operaciones."""

    def __init__(self):
        self.state = CalculatorState()

    # ── Entrada de números ───────────────────────────────────────

    def input_digit(self, digit) -> CalculatorState:
        if not isinstance(digit, str) or len(digit) != 1 or digit not in "0123456789":
            logger.debug("Dígito ignorado: {!r}", digit)
            return self.state

        state = self.state
        if state.is_typing:
            state.entry = state.entry.with_digit(digit)
        else:
            self._start_new_entry()
            state.entry = Entry.from_digit(digit)
        self._settle(self._typing_phase())
        return state

    def input_dot(self) -> CalculatorState:
        state = self.state
        if state.is_typing:
            state.entry = state.entry.with_dot()
        else:
            self._start_new_entry()
            state.entry = Entry("0.")
        self._settle(self._typing_phase())
        return state

    def toggle_sign(self) -> CalculatorState:
        self.state.entry = self.state.entry.negated()
        return self.state

    def percent(self) -> CalculatorState:
        state = self.state
        if state.is_error:
            return state

        current = state.entry.value
        if state.has_pending:
            result = state.pending_operand * current / 100
        else:
            result = current / 100

        state.entry = Entry.from_number(result)
        self._settle(self._typing_phase())
        return state

    # ── Operadores ───────────────────────────────────────────────

    def set_operator(self, op) -> CalculatorState:
        operator = Operator.parse(op)
        state = self.state
        if operator is None:
            logger.debug("Operador ignorado: {!r}", op)
            return state

        if state.is_error:
            state.entry = Entry.zero()
            state.pending_operand = 0.0
            state.pending_operator = operator
        elif state.has_pending and state.is_typing:
            self._fold()
            if not state.entry.is_error:
                state.pending_operand = state.entry.value
                state.pending_operator = operator
                logger.debug(
                    "Operación encadenada: {} {}",
                    state.current_entry,
                    operator.value,
                )
        elif state.has_pending:
            state.pending_operator = operator
        else:
            state.pending_operand = state.entry.value
            state.pending_operator = operator

        self._settle(Phase.OPERATOR_SELECTED)
        return state

    def evaluate(self) -> CalculatorState:
        if self.state.has_pending:
            self._fold()
        self._settle(Phase.JUST_EVALUATED)
        return self.state

    # ── Borrado ──────────────────────────────────────────────────

    def clear_all(self) -> CalculatorState:
        self.state = CalculatorState()
        return self.state

    def clear_entry(self) -> CalculatorState:
        self.state.entry = Entry.zero()
        self._settle(self._resting_phase())
        return self.state

    def clear(self) -> CalculatorState:
        """Tecla C/AC: borra la entrada si hay algo que borrar, si no todo."""
        if self.state.can_clear_entry:
            return self.clear_entry()
        return self.clear_all()

    # ── Internos ─────────────────────────────────────────────────

    def _typing_phase(self) -> Phase:
        if self.state.has_pending:
            return Phase.TYPING_SECOND
        return Phase.TYPING_FIRST

    def _resting_phase(self) -> Phase:
        if self.state.has_pending:
            return Phase.OPERATOR_SELECTED
        return Phase.IDLE

    def _start_new_entry(self):
        # Tras "=" el siguiente número empieza un cálculo nuevo.
        if self.state.just_evaluated:
            self._drop_pending()

    def _drop_pending(self):
        self.state.pending_operand = None
        self.state.pending_operator = None

    def _fold(self):
        """Combina el par pendiente con la entrada y vacía el par."""
        state = self.state
        result = compute(
            state.pending_operand,
            state.entry.value,
            state.pending_operator,
        )
        state.entry = Entry.from_number(result)
        self._drop_pending()

    def _settle(self, phase: Phase):
        state = self.state
        if not state.entry.is_error:
            state.phase = phase
            return
        if state.phase is not Phase.ERROR:
            logger.debug("Resultado no finito, pantalla en estado de error")
        state.phase = Phase.ERROR
