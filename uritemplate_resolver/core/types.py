"""Core data types for URI template parsing and expansion.

All data structures are frozen dataclasses with attribute access.
A parsed template is a tuple of components (Literal | Expression) and is
shared read-only between callers.

Resolved values (Absent, Text, ListValue, AssocValue) are built fresh for
each expansion call and discarded afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uritemplate_resolver.operators import Operator


# =============================================================================
# Template components
# =============================================================================


@dataclass(frozen=True)
class Literal:
    """Verbatim run of template text."""

    text: str


@dataclass(frozen=True)
class VarSpec:
    """One variable reference inside an expression.

    `exploded` and a positive `max_length` never appear together; the
    template grammar has no way to express both.
    """

    name: str
    exploded: bool = False
    max_length: int = 0  # 0 = no prefix truncation

    def __post_init__(self) -> None:
        if self.max_length < 0:
            raise ValueError(f"max_length must be >= 0, got {self.max_length}")
        if self.exploded and self.max_length:
            raise ValueError(f"VarSpec '{self.name}' cannot be both exploded and prefixed")

    def __str__(self) -> str:
        if self.exploded:
            return f"{self.name}*"
        if self.max_length:
            return f"{self.name}:{self.max_length}"
        return self.name


@dataclass(frozen=True)
class Expression:
    """A single `{...}` block: operator plus one or more VarSpecs."""

    operator: "Operator"
    var_specs: tuple[VarSpec, ...]

    def __post_init__(self) -> None:
        if not self.var_specs:
            raise ValueError("Expression requires at least one VarSpec")

    def __str__(self) -> str:
        specs = ",".join(str(spec) for spec in self.var_specs)
        return f"{{{self.operator.symbol}{specs}}}"


Component = Literal | Expression

# Parsed template: immutable, ordered, safe to expand concurrently
ParsedTemplate = tuple[Component, ...]


# =============================================================================
# Resolved values
# =============================================================================


@dataclass(frozen=True)
class Absent:
    """Variable is undefined (missing key or explicit None)."""

    def __bool__(self) -> bool:
        return False


ABSENT = Absent()


@dataclass(frozen=True)
class Text:
    """Scalar string value."""

    value: str


@dataclass(frozen=True)
class ListValue:
    """Ordered list of strings. None items keep their slot and expand to ""."""

    items: tuple[str | None, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class AssocValue:
    """Ordered (key, value) pairs. None values expand to ""."""

    pairs: tuple[tuple[str, str | None], ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.pairs)


ResolvedValue = Absent | Text | ListValue | AssocValue


class UriKind(str, Enum):
    """Which kinds of URI resolve_uri() accepts."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"
    RELATIVE_OR_ABSOLUTE = "relative_or_absolute"
