"""Formato de resultados numéricos para la pantalla de la calculadora.

Contrato de interfaz:
    - format_number(value) -> str
    - nunca lanza excepciones; los valores no finitos se muestran como
      ERROR_TOKEN.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext


ERROR_TOKEN = "Ошибка"

SCIENTIFIC_UPPER_BOUND = 1e12
SCIENTIFIC_LOWER_BOUND = 1e-9
SCIENTIFIC_DIGITS = 9
DISPLAY_PRECISION = 12

# Exponentes fuera de este rango pasan a notación exponencial
# al redondear a DISPLAY_PRECISION dígitos significativos.
_FIXED_MIN_EXPONENT = -6


def format_number(value) -> str:
    """Devuelve la representación de `value` para la pantalla."""
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return ERROR_TOKEN

    if not math.isfinite(number):
        return ERROR_TOKEN

    magnitude = abs(number)
    if magnitude >= SCIENTIFIC_UPPER_BOUND or (
        magnitude != 0 and magnitude < SCIENTIFIC_LOWER_BOUND
    ):
        text = _to_exponential(number, SCIENTIFIC_DIGITS)
    else:
        text = _to_precision(number, DISPLAY_PRECISION)

    if "e" in text:
        mantissa, exponent = text.split("e")
        text = f"{_trim_trailing(mantissa)}e{exponent}"
    else:
        text = _trim_trailing(text)

    # 1.797693135e+308 ya no cabe en un float al volver a leerlo
    if not math.isfinite(float(text)):
        return ERROR_TOKEN
    if text == "-0":
        return "0"
    return text


# ── Representaciones ─────────────────────────────────────────────

def _round_significant(number: float, digits: int) -> Decimal:
    """Redondea el valor binario exacto; los empates se alejan del cero."""
    with localcontext() as ctx:
        ctx.prec = digits
        ctx.rounding = ROUND_HALF_UP
        return +Decimal(number)


def _split_exponential(number: float, fraction_digits: int) -> tuple[str, int]:
    rounded = _round_significant(number, fraction_digits + 1)
    exponent = rounded.adjusted()
    mantissa = f"{rounded.scaleb(-exponent):.{fraction_digits}f}"
    return mantissa, exponent


def _to_exponential(number: float, fraction_digits: int) -> str:
    mantissa, exponent = _split_exponential(number, fraction_digits)
    return f"{mantissa}e{exponent:+d}"


def _to_precision(number: float, precision: int) -> str:
    if number == 0:
        return "0." + "0" * (precision - 1)

    # El exponente se toma tras redondear: 999999999999.95 -> 1e+12
    rounded = _round_significant(number, precision)
    exponent = rounded.adjusted()
    if exponent < _FIXED_MIN_EXPONENT or exponent >= precision:
        return _to_exponential(number, precision - 1)

    decimals = max(0, precision - 1 - exponent)
    return f"{rounded:.{decimals}f}"


def _trim_trailing(text: str) -> str:
    """Quita ceros finales y un punto decimal colgante."""
    if "." not in text:
        return text
    text = text.rstrip("0")
    if text.endswith("."):
        text = text[:-1]
    if text == "-0":
        return "0"
    return text
