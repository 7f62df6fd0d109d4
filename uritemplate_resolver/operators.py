"""Expression operators and their expansion behavior.

RFC 6570 defines eight operator symbols plus the default (no symbol).
Each operator maps to a fixed OperatorSpec row that the expander reads:
what to emit before the first field, how to join fields, whether fields
are named (`name=value`), what follows a name whose value is empty, and
whether reserved characters may pass through unencoded.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class OperatorSpec:
    """Expansion behavior for one operator."""

    prefix: str
    separator: str
    named: bool
    empty_suffix: str
    allow_reserved: bool


class Operator(Enum):
    """Expression operators, keyed by symbol ("" for the default)."""

    DEFAULT = ""
    RESERVED = "+"  # {+var}
    FRAGMENT = "#"  # {#var}
    LABEL = "."  # {.var}
    PATH = "/"  # {/var}
    PATH_PARAM = ";"  # {;var}
    QUERY = "?"  # {?var}
    QUERY_CONTINUATION = "&"  # {&var}

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def spec(self) -> OperatorSpec:
        return OPERATOR_TABLE[self]

    @property
    def prefix(self) -> str:
        return self.spec.prefix

    @property
    def separator(self) -> str:
        return self.spec.separator

    @property
    def named(self) -> bool:
        return self.spec.named

    @property
    def empty_suffix(self) -> str:
        return self.spec.empty_suffix

    @property
    def allow_reserved(self) -> bool:
        return self.spec.allow_reserved


OPERATOR_TABLE: dict[Operator, OperatorSpec] = {
    Operator.DEFAULT: OperatorSpec("", ",", False, "", False),
    Operator.RESERVED: OperatorSpec("", ",", False, "", True),
    Operator.FRAGMENT: OperatorSpec("#", ",", False, "", True),
    Operator.LABEL: OperatorSpec(".", ".", False, "", False),
    Operator.PATH: OperatorSpec("/", "/", False, "", False),
    Operator.PATH_PARAM: OperatorSpec(";", ";", True, "", False),
    Operator.QUERY: OperatorSpec("?", "&", True, "=", False),
    Operator.QUERY_CONTINUATION: OperatorSpec("&", "&", True, "=", False),
}

_BY_SYMBOL: dict[str, Operator] = {op.symbol: op for op in Operator if op.symbol}


def try_parse_operator(ch: str) -> Operator | None:
    """Get the operator for a symbol character, or None if it is not one."""
    return _BY_SYMBOL.get(ch)


def get_operator(symbol: str) -> Operator:
    """Get an operator by symbol ("" for the default).

    Raises:
        KeyError: if `symbol` is not an operator symbol
    """
    if symbol == "":
        return Operator.DEFAULT
    return _BY_SYMBOL[symbol]
