"""Valor inmutable del número que se está tecleando en la calculadora."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import ClassVar

from number_formatter import ERROR_TOKEN, format_number


@dataclass(frozen=True)
class Entry:
    """Texto de la pantalla: literal tecleado, resultado formateado o error.

    Un literal tecleado admite un signo menos inicial, dígitos y como
    mucho un punto decimal, con un máximo de MAX_LENGTH caracteres. Los
    resultados de un cálculo (computed=True) llegan ya formateados por
    format_number, pueden estar en notación exponencial y no tienen
    límite de longitud.
    """

    text: str = "0"
    computed: bool = field(default=False, compare=False)

    MAX_LENGTH: ClassVar[int] = 14

    _TYPED_RE: ClassVar[re.Pattern] = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d*)?")
    _RESULT_RE: ClassVar[re.Pattern] = re.compile(
        r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:e[+-]\d+)?"
    )

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise ValueError("La entrada debe ser una cadena")
        if self.text == ERROR_TOKEN:
            return
        if self.computed:
            if self._RESULT_RE.fullmatch(self.text):
                return
            raise ValueError(f"Resultado inválido: {self.text!r}")
        if not self._TYPED_RE.fullmatch(self.text):
            raise ValueError(f"Entrada inválida: {self.text!r}")
        if len(self.text) > self.MAX_LENGTH:
            raise ValueError(
                f"La entrada supera {self.MAX_LENGTH} caracteres: {self.text!r}"
            )

    # ── Constructores ────────────────────────────────────────────

    @classmethod
    def zero(cls) -> Entry:
        return cls("0")

    @classmethod
    def error(cls) -> Entry:
        return cls(ERROR_TOKEN)

    @classmethod
    def from_digit(cls, digit: str) -> Entry:
        return cls(digit)

    @classmethod
    def from_number(cls, value) -> Entry:
        return cls(format_number(value), computed=True)

    # ── Consultas ────────────────────────────────────────────────

    @property
    def is_error(self) -> bool:
        return self.text == ERROR_TOKEN

    @property
    def is_zero(self) -> bool:
        return self.text == "0"

    @property
    def is_exponential(self) -> bool:
        return "e" in self.text and not self.is_error

    @property
    def value(self) -> float:
        if self.is_error:
            return math.nan
        return float(self.text)

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    # ── Edición ──────────────────────────────────────────────────

    def with_digit(self, digit: str) -> Entry:
        if self.is_error or self.is_zero or self.is_exponential:
            return Entry.from_digit(digit)
        if len(self.text) >= self.MAX_LENGTH:
            return self
        return Entry(self.text + digit)

    def with_dot(self) -> Entry:
        if self.is_error or self.is_exponential:
            return Entry("0.")
        if "." in self.text or len(self.text) >= self.MAX_LENGTH:
            return self
        return Entry(self.text + ".")

    def negated(self) -> Entry:
        if self.is_error or self.is_zero:
            return self
        if self.text.startswith("-"):
            return Entry(self.text[1:], computed=self.computed)
        text = "-" + self.text
        if self.computed:
            return Entry(text, computed=True)
        # El punto colgante no cambia el valor: "-1234567890123." -> "-1234567890123"
        if len(text) > self.MAX_LENGTH and text.endswith("."):
            text = text[:-1]
        if len(text) > self.MAX_LENGTH:
            return self
        return Entry(text)
