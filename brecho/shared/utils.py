from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Any

CENTAVOS = Decimal("0.01")
ZERO = Decimal("0.00")


def safe_decimal(value: Any) -> Decimal:
    """Converte qualquer entrada (JSON, planilha, DataFrame) para Decimal seguro.
    Floats passam por str() para não herdar o erro binário."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return ZERO
    if isinstance(value, (float, int)):
        return Decimal(str(value))
    if isinstance(value, str):
        cleaned = value.strip().replace(",", ".")
        try:
            return Decimal(cleaned)
        except InvalidOperation:
            return ZERO
    return ZERO


def arredondar(valor: Decimal) -> Decimal:
    """Arredonda para centavos (meio para cima), fronteira de todo valor monetário."""
    return safe_decimal(valor).quantize(CENTAVOS, rounding=ROUND_HALF_UP)


def para_float(valor: Decimal) -> float:
    return float(arredondar(valor))
