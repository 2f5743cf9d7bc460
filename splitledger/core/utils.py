from decimal import Decimal, ROUND_HALF_UP, getcontext

getcontext().prec = 28
CENTS = Decimal("0.01")

# payments / balances at or below this are treated as settled
SETTLE_EPS = 1e-6

# floating point residue snapped to 0.0 after folding balances
NOISE_EPS = 1e-9

# allowed gap between an exact split's shares and its amount
SHARE_TOLERANCE = 0.01


def qround(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)


def fmt_amount(value: float) -> str:
    """
    Two-decimal text for a float amount, e.g. 33.333 -> "33.33".
    """
    if abs(value) < SETTLE_EPS:
        value = 0.0
    return str(qround(Decimal(repr(value))))
