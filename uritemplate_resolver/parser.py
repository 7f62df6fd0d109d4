"""URI template parser.

Turns template text into an ordered tuple of components in a single
forward pass with no backtracking. The scanner is a five-state machine;
each state has its own handler method:

    LITERAL             plain text outside braces (initial state)
    EXPRESSION          the character right after '{' (operator or name)
    VARSPEC             accumulating a variable name
    VARSPEC_EXPLODED    after '*', only ',' or '}' may follow
    VARSPEC_MAX_LENGTH  after ':', reading the decimal prefix length

Usage:
    from uritemplate_resolver.parser import parse

    components = parse("http://example.com/{path}{?q*}")
"""

import logging
from enum import Enum, auto

from uritemplate_resolver.charspec import is_hex_digit, is_var_char
from uritemplate_resolver.config import get_settings
from uritemplate_resolver.core import Component, Expression, Literal, ParsedTemplate, VarSpec
from uritemplate_resolver.exceptions import UriTemplateError, UriTemplateParseError
from uritemplate_resolver.operators import Operator, try_parse_operator

logger = logging.getLogger(__name__)

_NO_DIGITS = -1


class ParserState(Enum):
    LITERAL = auto()
    EXPRESSION = auto()
    VARSPEC = auto()
    VARSPEC_EXPLODED = auto()
    VARSPEC_MAX_LENGTH = auto()


class TemplateParser:
    """Single-use scanner for one template string.

    Use parse() or TemplateParser(template).parse(); an instance keeps
    scan state and must not be shared between threads.
    """

    def __init__(self, template: str, *, strict_pct_encoded_names: bool | None = None):
        if not isinstance(template, str):
            raise TypeError(f"template must be str, not {type(template).__name__}")
        if strict_pct_encoded_names is None:
            strict_pct_encoded_names = get_settings().strict_pct_encoded_names

        self.template = template
        self._strict_names = strict_pct_encoded_names

        self._components: list[Component] = []
        self._buffer: list[str] = []
        self._state = ParserState.LITERAL
        self._position = 0
        self._operator = Operator.DEFAULT
        self._var_specs: list[VarSpec] = []
        self._exploded = False
        self._max_length = 0

        self._handlers = {
            ParserState.LITERAL: self._read_literal,
            ParserState.EXPRESSION: self._read_expression,
            ParserState.VARSPEC: self._read_var_spec,
            ParserState.VARSPEC_EXPLODED: self._read_var_spec_exploded,
            ParserState.VARSPEC_MAX_LENGTH: self._read_var_spec_max_length,
        }

    def parse(self) -> ParsedTemplate:
        """Scan the whole template.

        Returns:
            Tuple of Literal and Expression components in template order

        Raises:
            UriTemplateParseError: on malformed template text
        """
        try:
            for position, ch in enumerate(self.template):
                self._position = position
                self._handlers[self._state](ch)

            if self._state is not ParserState.LITERAL:
                self._position = len(self.template)
                self._fail("Unexpected end of URI template")

            self._flush_literal()
        except UriTemplateError as e:
            logger.debug("[PARSER] Rejected template %r: %s", self.template, e)
            raise
        except Exception as e:
            logger.debug("[PARSER] Scan failure in %r at %d: %s", self.template, self._position, e)
            raise UriTemplateParseError(
                f"Error at parse URI template: {e}", self.template, self._position
            ) from e

        components = tuple(self._components)
        logger.debug("[PARSER] Parsed %r into %d components", self.template, len(components))
        return components

    # =========================================================================
    # State handlers
    # =========================================================================

    def _read_literal(self, ch: str) -> None:
        if ch == "{":
            self._state = ParserState.EXPRESSION
        elif ch == "}":
            self._fail('Invalid literal character "}"')
        else:
            self._buffer.append(ch)

    def _read_expression(self, ch: str) -> None:
        self._flush_literal()
        self._state = ParserState.VARSPEC

        operator = try_parse_operator(ch)
        if operator is None:
            # No operator symbol: this char is the first char of the name
            self._operator = Operator.DEFAULT
            self._read_var_spec(ch)
        else:
            self._operator = operator

    def _read_var_spec(self, ch: str) -> None:
        if self._try_end_var_spec(ch):
            return

        if ch == "*":
            self._state = ParserState.VARSPEC_EXPLODED
        elif ch == ":":
            self._max_length = _NO_DIGITS
            self._state = ParserState.VARSPEC_MAX_LENGTH
        elif is_var_char(ch):
            self._buffer.append(ch)
        else:
            self._fail("Invalid name of template variable")

    def _read_var_spec_exploded(self, ch: str) -> None:
        self._exploded = True
        if not self._try_end_var_spec(ch):
            self._fail("Invalid URI template modifier")

    def _read_var_spec_max_length(self, ch: str) -> None:
        if "0" <= ch <= "9":
            digit = ord(ch) - ord("0")
            if self._max_length == _NO_DIGITS:
                self._max_length = digit
            else:
                self._max_length = self._max_length * 10 + digit
        elif not self._try_end_var_spec(ch):
            self._fail("Invalid URI template length modifier")

    # =========================================================================
    # Component construction
    # =========================================================================

    def _try_end_var_spec(self, ch: str) -> bool:
        if ch not in ",}":
            return False

        self._create_var_spec()
        if ch == "}":
            self._create_expression()
            self._state = ParserState.LITERAL
        else:
            self._state = ParserState.VARSPEC
        return True

    def _create_var_spec(self) -> None:
        if self._max_length == _NO_DIGITS:
            self._fail("Invalid URI template modifier")

        name = "".join(self._buffer)
        if not name:
            self._fail("Invalid name of template variable")
        if self._strict_names:
            self._check_pct_triplets(name)

        self._var_specs.append(VarSpec(name, self._exploded, self._max_length))
        self._buffer.clear()
        self._exploded = False
        self._max_length = 0

    def _create_expression(self) -> None:
        self._components.append(Expression(self._operator, tuple(self._var_specs)))
        self._var_specs = []

    def _flush_literal(self) -> None:
        if self._buffer:
            self._components.append(Literal("".join(self._buffer)))
            self._buffer.clear()

    def _check_pct_triplets(self, name: str) -> None:
        i = 0
        while i < len(name):
            if name[i] != "%":
                i += 1
                continue
            triplet = name[i + 1 : i + 3]
            if len(triplet) != 2 or not all(is_hex_digit(c) for c in triplet):
                self._fail("Invalid percent-encoded triplet in template variable name")
            i += 3

    def _fail(self, message: str) -> None:
        raise UriTemplateParseError(message, self.template, self._position)


def parse(template: str) -> ParsedTemplate:
    """Parse template text into components.

    Raises:
        UriTemplateParseError: on malformed template text
    """
    return TemplateParser(template).parse()


def variable_names(components: ParsedTemplate) -> tuple[str, ...]:
    """Get variable names referenced by parsed components, in first-use order."""
    seen: dict[str, None] = {}
    for component in components:
        if isinstance(component, Expression):
            for spec in component.var_specs:
                seen.setdefault(spec.name)
    return tuple(seen)
