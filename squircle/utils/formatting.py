"""Number rendering for path coordinates. No engine imports.

Path strings are consumed by SVG renderers and by existing tooling that
expects ECMAScript ``Number.prototype.toString`` output, so coordinates are
rendered with those rules rather than Python's ``repr``.
"""

from __future__ import annotations

import math

# ECMAScript switches to exponent notation outside 1e-6 <= |v| < 1e21.
_MAX_FIXED_EXPONENT = 21
_MIN_FIXED_EXPONENT = -6


def _shortest_digits(value: float) -> tuple[str, int]:
    """Return (digits, n) such that |value| = 0.digits * 10**n.

    Uses repr() for the shortest round-tripping digit string.
    """
    text = repr(abs(value))
    mantissa, _, exp = text.partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    digits = int_part + frac_part
    n = len(int_part) + (int(exp) if exp else 0)

    stripped = digits.lstrip("0")
    n -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")
    return digits, n


def format_number(value: float) -> str:
    """Render a float the way ECMAScript renders a Number."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        # -0 renders as "0"
        return "0"

    sign = "-" if value < 0 else ""
    digits, n = _shortest_digits(value)
    k = len(digits)

    if k <= n <= _MAX_FIXED_EXPONENT:
        return sign + digits + "0" * (n - k)
    if 0 < n <= _MAX_FIXED_EXPONENT:
        return sign + digits[:n] + "." + digits[n:]
    if _MIN_FIXED_EXPONENT < n <= 0:
        return sign + "0." + "0" * (-n) + digits

    exponent = n - 1
    exp_sign = "+" if exponent >= 0 else "-"
    head = digits[0] if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{head}e{exp_sign}{abs(exponent)}"
