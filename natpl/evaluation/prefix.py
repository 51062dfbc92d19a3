from __future__ import annotations

from natpl.errors import InvalidSiPrefix
from natpl.syntax import FC, SiPrefix
from natpl.types.value import Number, Value


def apply_prefix(fc: FC, prefix: SiPrefix, value: Value) -> Value:
    """Scale the magnitude of `value` by the power of ten `prefix` stands for.

    The shift is done on the decimal exponent, so no rounding happens for any
    magnitude that fits the context precision. The unit is left unchanged.
    """
    match value.kind:
        case Number(value=x):
            return Value(Number(x.scaleb(prefix.exponent)), value.unit)
    raise InvalidSiPrefix(fc, prefix, value)
