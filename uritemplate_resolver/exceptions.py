"""Exceptions raised while parsing and resolving URI templates.

Two disjoint failure kinds come out of the engine itself:
- UriTemplateParseError: malformed template text (raised by the parser)
- InvalidValueTypeError: a value that is not str / sequence / mapping
  (raised during expansion)

UriSyntaxError is raised only by the resolve_uri() conveniences when the
expanded string is not a URI of the requested kind.
"""


class UriTemplateError(Exception):
    """Base class for all uritemplate_resolver errors."""


class UriTemplateParseError(UriTemplateError):
    """Template text could not be parsed.

    Attributes:
        message: What went wrong
        template: The full original template text
        position: 0-based index of the offending character
    """

    def __init__(self, message: str, template: str, position: int) -> None:
        self.message = message
        self.template = template
        self.position = position
        super().__init__(f"{message} (at position {position} in template {template!r})")


class InvalidValueTypeError(UriTemplateError, TypeError):
    """A variable value has a type the expander cannot render.

    Attributes:
        name: The variable name
        type_description: The concrete type or shape that was supplied
    """

    def __init__(self, name: str, type_description: str) -> None:
        self.name = name
        self.type_description = type_description
        super().__init__(
            f'Invalid value type of variable "{name}": {type_description}. '
            "Expected: str, sequence of str, or mapping of str to str."
        )


class UriSyntaxError(UriTemplateError, ValueError):
    """An expanded template is not a legal URI of the requested kind."""

    def __init__(self, uri: str, kind: str, reason: str) -> None:
        self.uri = uri
        self.kind = kind
        self.reason = reason
        super().__init__(f"Invalid {kind} URI {uri!r}: {reason}")
