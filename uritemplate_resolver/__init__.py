"""RFC 6570 URI Template Resolution Engine.

Parses URI templates once and expands them against variable values.

Usage:
    from uritemplate_resolver import UriTemplate, resolve

    template = UriTemplate("http://example.com{/paths*}{?q1,q2}{#f*}")
    result = template.resolve({"paths": ["foo", "bar"], "q1": "abc"})
    # -> "http://example.com/foo/bar?q1=abc"

    resolve("http://example.com/{path}", {"path": "foo"})
    # -> "http://example.com/foo"

Values may be str, a sequence of str, or a mapping of str to str.
Missing and None values are skipped; other types raise
InvalidValueTypeError.
"""

import logging

from uritemplate_resolver.config import ResolverSettings, configure, get_settings, reset_settings
from uritemplate_resolver.core import (
    Component,
    Expression,
    Literal,
    ParsedTemplate,
    UriKind,
    VarSpec,
)
from uritemplate_resolver.exceptions import (
    InvalidValueTypeError,
    UriSyntaxError,
    UriTemplateError,
    UriTemplateParseError,
)
from uritemplate_resolver.expander import expand
from uritemplate_resolver.operators import Operator, OperatorSpec
from uritemplate_resolver.parser import parse
from uritemplate_resolver.resolver import TemplateResolver, UriTemplate, resolve, to_uri

__all__ = [
    # Main API
    "TemplateResolver",
    "UriKind",
    "UriTemplate",
    "expand",
    "parse",
    "resolve",
    "to_uri",
    # Components
    "Component",
    "Expression",
    "Literal",
    "Operator",
    "OperatorSpec",
    "ParsedTemplate",
    "VarSpec",
    # Errors
    "InvalidValueTypeError",
    "UriSyntaxError",
    "UriTemplateError",
    "UriTemplateParseError",
    # Settings
    "ResolverSettings",
    "configure",
    "get_settings",
    "reset_settings",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
