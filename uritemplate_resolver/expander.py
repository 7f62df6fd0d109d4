"""Expansion engine: parsed components + values -> string.

Each Expression is rendered per RFC 6570 section 3.2:

    {var}        foo,bar          default: comma-joined
    {+var}       /foo/bar         reserved characters kept
    {#var}       #foo             fragment
    {.var}       .foo.bar         label
    {/var*}      /foo/bar         path segments
    {;var}       ;x=1;y           path-style parameters
    {?var}       ?x=1&y=2         form-style query
    {&var}       &x=1&y=2         query continuation

Undefined variables (missing, None, empty list, empty mapping) are skipped.
An expression with nothing left to render contributes nothing, not even
its prefix character.
"""

import logging
from collections.abc import Mapping
from typing import Any

from uritemplate_resolver.coercion import coerce
from uritemplate_resolver.core import (
    AssocValue,
    Expression,
    ListValue,
    Literal,
    ParsedTemplate,
    ResolvedValue,
    Text,
    VarSpec,
)
from uritemplate_resolver.encoding import encode
from uritemplate_resolver.operators import Operator

logger = logging.getLogger(__name__)


def _is_defined(value: ResolvedValue) -> bool:
    if isinstance(value, Text):
        return True
    if isinstance(value, (ListValue, AssocValue)):
        return len(value) > 0
    return False


def _named(operator: Operator, name: str, encoded: str) -> str:
    """Render `name=value`, or `name` + empty-suffix for an empty value."""
    if not encoded:
        return name + operator.empty_suffix
    return f"{name}={encoded}"


def _render_text(operator: Operator, spec: VarSpec, value: Text) -> str:
    text = value.value
    if spec.max_length:
        text = text[: spec.max_length]
    encoded = encode(text, operator.allow_reserved)
    if operator.named:
        return _named(operator, spec.name, encoded)
    return encoded


def _render_list(operator: Operator, spec: VarSpec, value: ListValue) -> str:
    encoded = [encode(item or "", operator.allow_reserved) for item in value.items]

    if spec.exploded:
        if operator.named:
            encoded = [_named(operator, spec.name, item) for item in encoded]
        return operator.separator.join(encoded)

    joined = ",".join(encoded)
    if operator.named:
        return _named(operator, spec.name, joined)
    return joined


def _render_assoc(operator: Operator, spec: VarSpec, value: AssocValue) -> str:
    reserved = operator.allow_reserved
    pairs = [(encode(key, reserved), encode(val or "", reserved)) for key, val in value.pairs]

    if spec.exploded:
        # Each pair supplies its own key; the variable name is not used
        return operator.separator.join(f"{key}={val}" for key, val in pairs)

    joined = ",".join(f"{key},{val}" for key, val in pairs)
    if operator.named:
        return f"{spec.name}={joined}"
    return joined


def render_var_spec(operator: Operator, spec: VarSpec, value: ResolvedValue) -> str:
    """Render one defined variable under an operator."""
    if isinstance(value, Text):
        return _render_text(operator, spec, value)
    if isinstance(value, ListValue):
        return _render_list(operator, spec, value)
    if isinstance(value, AssocValue):
        return _render_assoc(operator, spec, value)
    raise ValueError(f"Cannot render undefined variable '{spec.name}'")


def expand_expression(expression: Expression, values: Mapping[str, Any]) -> str:
    """Render one `{...}` block. Returns "" when every variable is undefined.

    Raises:
        InvalidValueTypeError: if a value has an unsupported type
    """
    operator = expression.operator
    fields = []
    for spec in expression.var_specs:
        value = coerce(spec.name, values.get(spec.name))
        if _is_defined(value):
            fields.append(render_var_spec(operator, spec, value))

    if not fields:
        return ""
    return operator.prefix + operator.separator.join(fields)


def expand(components: ParsedTemplate, values: Mapping[str, Any] | None = None) -> str:
    """Expand parsed components against a name -> value mapping.

    The mapping is only read. Output is assembled locally, so a failure
    leaves nothing half-written.

    Raises:
        InvalidValueTypeError: if a value has an unsupported type
    """
    if values is None:
        values = {}

    parts: list[str] = []
    for component in components:
        if isinstance(component, Literal):
            parts.append(component.text)
        elif isinstance(component, Expression):
            parts.append(expand_expression(component, values))
        else:
            raise TypeError(f"Unknown template component: {component!r}")

    result = "".join(parts)
    logger.debug("[EXPANDER] Expanded %d components -> %r", len(components), result)
    return result
