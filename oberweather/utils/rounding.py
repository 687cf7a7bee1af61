import math
from decimal import ROUND_HALF_UP, Decimal

# Ties go up, matching toFixed / Math.round in spreadsheet-style displays.


def round_half_up(value: float, ndigits: int = 1) -> float:
    # Decimal(value) is the exact binary value, so 60.549999... stays below the tie
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_int(value: float) -> int:
    return int(math.floor(float(value) + 0.5))
