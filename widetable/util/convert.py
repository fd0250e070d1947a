"""Conversion of arbitrary row values into the text the table lays out."""

import decimal
import logging
import math
from typing import Any, Iterable, Tuple

logger = logging.getLogger(__name__)

# Shortest floats switch to exponent form from this decimal exponent upwards.
FLOAT_EXP_THRESHOLD = 6


class ConversionError(ValueError):
    def __init__(self, value):
        super().__init__(f'Cannot convert value of type {type(value).__name__} to text.')
        self.value = value


def _has_own_str(value):
    return type(value).__str__ is not object.__str__


def format_float(f: float) -> str:
    """Formats ``f`` with the fewest digits that read back as the same float.

    Plain notation is used for decimal exponents from -4 up to 5, exponent
    notation with a signed two digit exponent otherwise: ``4.0`` gives ``4``,
    ``1e6`` gives ``1e+06``, ``0.00001`` gives ``1e-05``.
    """
    if math.isnan(f):
        return 'NaN'
    if math.isinf(f):
        return '+Inf' if f > 0 else '-Inf'
    sign, digits, exponent = decimal.Decimal(repr(f)).as_tuple()
    prefix = '-' if sign else ''
    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    if digits == [0]:
        return prefix + '0'
    s = ''.join(map(str, digits))
    nd = len(s)
    # value is 0.<s> * 10**dp
    dp = nd + exponent
    x = dp - 1
    if x < -4 or x >= FLOAT_EXP_THRESHOLD:
        mantissa = s[0] + ('.' + s[1:] if nd > 1 else '')
        return f'{prefix}{mantissa}e{x:+03d}'
    if dp <= 0:
        return f'{prefix}0.{"0" * -dp}{s}'
    if dp >= nd:
        return prefix + s + '0' * (dp - nd)
    return f'{prefix}{s[:dp]}.{s[dp:]}'


def to_text(value: Any) -> str:
    """Returns the canonical text form of ``value``.

    Strings pass through and byte strings are decoded as UTF-8. An object
    whose class defines its own ``__str__`` uses it, numeric subclasses
    included. Otherwise booleans become ``true``/``false`` and numbers their
    shortest decimal form; anything else is a ConversionError.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode('utf-8')
        except UnicodeDecodeError as e:
            raise ConversionError(value) from e
    if _has_own_str(value):
        return str(value)
    # bool is a subclass of int, so it has to be checked first.
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return format_float(float(value))
    raise ConversionError(value)


def to_row(values: Iterable[Any]) -> Tuple[str, ...]:
    row = tuple(to_text(v) for v in values)
    logger.debug('Converted row of %d values', len(row))
    return row
