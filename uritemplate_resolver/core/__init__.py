"""Core types for uritemplate_resolver.

All data structures are frozen dataclasses with attribute access.
"""

from uritemplate_resolver.core.types import (
    ABSENT,
    Absent,
    AssocValue,
    Component,
    Expression,
    ListValue,
    Literal,
    ParsedTemplate,
    ResolvedValue,
    Text,
    UriKind,
    VarSpec,
)

__all__ = [
    # Template components
    "Component",
    "Expression",
    "Literal",
    "ParsedTemplate",
    "VarSpec",
    # Resolved values
    "ABSENT",
    "Absent",
    "AssocValue",
    "ListValue",
    "ResolvedValue",
    "Text",
    # URI conversion
    "UriKind",
]
