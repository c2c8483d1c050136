"""Text helpers: whitespace simplification, splitting and number conversions.

Integer parsing follows 32-bit C limits: signed values must lie in
[-2147483648, 2147483647] and unsigned values in [0, 4294967295].
Malformed or out-of-range input raises ``ValueError``.
"""

from __future__ import annotations

_ASCII_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
UINT_MAX = 2**32 - 1
SHORT_MIN = -32768
SHORT_MAX = 32767
USHORT_MAX = 65535
MAX_PRECISION = 99

_FLOAT_FORMATS = frozenset("eEfFgG")


def _is_space(ch: str) -> bool:
    return ch in _ASCII_SPACE


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base: {base}")


def _digit_value(ch: str, base: int) -> int | None:
    """Return the value of ``ch`` as a digit in ``base``, or None."""
    if "0" <= ch <= "9":
        value = ord(ch) - ord("0")
    elif "a" <= ch <= "z":
        value = ord(ch) - ord("a") + 10
    elif "A" <= ch <= "Z":
        value = ord(ch) - ord("A") + 10
    else:
        return None
    return value if value < base else None


def simplified(text: str) -> str:
    """Strip ASCII whitespace at both ends and collapse inner runs to one space."""
    words = []
    current: list[str] = []
    for ch in text:
        if _is_space(ch):
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        words.append("".join(current))
    return " ".join(words)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``; an empty trailing piece is dropped."""
    if not text:
        return []
    if not sep:
        return [text]
    pieces = text.split(sep)
    if pieces[-1] == "":
        pieces.pop()
    return pieces


def _parse_integer(text: str, base: int, allow_negative: bool, limit: int) -> int:
    _check_base(base)
    n = len(text)
    i = 0
    while i < n and _is_space(text[i]):
        i += 1

    negative = False
    if i < n and text[i] == "-" and allow_negative:
        negative = True
        i += 1
    elif i < n and text[i] == "+":
        i += 1

    if i >= n or _digit_value(text[i], base) is None:
        raise ValueError(f"invalid integer: {text!r}")

    bound = limit + 1 if negative else limit
    value = 0
    while i < n:
        digit = _digit_value(text[i], base)
        if digit is None:
            break
        value = value * base + digit
        if value > bound:
            raise ValueError(f"integer out of range: {text!r}")
        i += 1

    while i < n and _is_space(text[i]):
        i += 1
    if i != n:
        raise ValueError(f"invalid integer: {text!r}")
    return -value if negative else value


def to_long(text: str, base: int = 10) -> int:
    """Parse a signed 32-bit integer, allowing surrounding ASCII whitespace."""
    return _parse_integer(text, base, allow_negative=True, limit=INT_MAX)


def to_ulong(text: str, base: int = 10) -> int:
    """Parse an unsigned 32-bit integer, allowing surrounding ASCII whitespace."""
    return _parse_integer(text, base, allow_negative=False, limit=UINT_MAX)


def to_short(text: str, base: int = 10) -> int:
    """Parse a signed 16-bit integer."""
    value = to_long(text, base)
    if not SHORT_MIN <= value <= SHORT_MAX:
        raise ValueError(f"short out of range: {text!r}")
    return value


def to_ushort(text: str, base: int = 10) -> int:
    """Parse an unsigned 16-bit integer."""
    value = to_ulong(text, base)
    if value > USHORT_MAX:
        raise ValueError(f"unsigned short out of range: {text!r}")
    return value


def to_double(text: str) -> float:
    """Parse a floating point number; leading whitespace is allowed, trailing is not."""
    if not text or _is_space(text[-1]):
        raise ValueError(f"invalid number: {text!r}")
    body = text.lstrip("".join(_ASCII_SPACE))
    if not body or not body.isascii() or "_" in body:
        raise ValueError(f"invalid number: {text!r}")
    unsigned = body.lstrip("+-")
    if unsigned[:2].lower() == "0x":
        try:
            return float.fromhex(body)
        except ValueError:
            raise ValueError(f"invalid number: {text!r}") from None
    try:
        return float(body)
    except ValueError:
        raise ValueError(f"invalid number: {text!r}") from None


def number(value: int, base: int = 10) -> str:
    """Render an integer in ``base`` using lowercase digits."""
    _check_base(base)
    negative = value < 0
    n = -value if negative else value
    digits = []
    while True:
        n, rem = divmod(n, base)
        digits.append(_DIGITS[rem])
        if n == 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def format_float(value: float, fmt: str = "g", precision: int = 6) -> str:
    """Format a float like printf ``%.<precision><fmt>``; precision is capped at 99."""
    if fmt not in _FLOAT_FORMATS:
        raise ValueError(f"unsupported float format: {fmt!r}")
    if precision < 0:
        return ("%" + fmt) % value
    precision = min(precision, MAX_PRECISION)
    return ("%." + str(precision) + fmt) % value