from decimal import Decimal, ROUND_HALF_UP


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with ties away from zero (2.5 -> 3), unlike the built-in banker's rounding.

    Goes through ``str`` so the shortest repr of the float is rounded, not its
    binary expansion (2.675 stays a tie).
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
