"""Character classes used by the template parser."""

import string

OPERATOR_CHARS = frozenset("+#./;?&")

_VAR_CHARS = frozenset(string.ascii_letters + string.digits + "_.%")
_HEX_DIGITS = frozenset(string.hexdigits)


def is_var_char(ch: str) -> bool:
    """True if `ch` may appear in a variable name (`%` starts a pct-triplet)."""
    return ch in _VAR_CHARS


def is_operator_char(ch: str) -> bool:
    """True if `ch` is one of the eight expression operator symbols."""
    return ch in OPERATOR_CHARS


def is_hex_digit(ch: str) -> bool:
    """True if `ch` is 0-9, a-f or A-F."""
    return ch in _HEX_DIGITS
