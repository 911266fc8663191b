from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]

def to_decimal(value: Number) -> Decimal:
    """Convierte a Decimal sin arrastrar el ruido binario de los float."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))

def round_half_up(value: Number) -> int:
    """Redondeo al entero más cercano con .5 hacia arriba (no el redondeo bancario de round())."""
    return int(to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
