from __future__ import annotations
import decimal
import os


# Same default precision as the arbitrary-precision decimal type natpl grew up on
_DEFAULT_DECIMAL_PRECISION = 100


def int_from_env(var: str, default: int, minimum: int = 1) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{var} must be at least {minimum}, got {value}")
    return value


def get_decimal_precision() -> int:
    return int_from_env('NATPL_DECIMAL_PRECISION', _DEFAULT_DECIMAL_PRECISION)


def decimal_context(precision: int | None = None) -> decimal.Context:
    """Context used for all magnitude arithmetic.

    Division by zero and invalid operations trap, so they can never leak an
    Infinity or NaN into a Value.
    """
    return decimal.Context(
        prec=precision if precision is not None else get_decimal_precision(),
        rounding=decimal.ROUND_HALF_EVEN,
        traps=[decimal.DivisionByZero, decimal.InvalidOperation, decimal.Overflow],
    )
