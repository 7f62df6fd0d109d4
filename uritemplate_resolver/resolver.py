"""Template facade: parse once, resolve many times.

Usage:
    from uritemplate_resolver import UriTemplate

    template = UriTemplate("http://example.org/{area}/last-news{?type,count}")
    template.resolve({"area": "world", "type": "actual", "count": "10"})
    # -> "http://example.org/world/last-news?type=actual&count=10"

    template.get_resolver().bind("area", "world").bind("type", ["it", "art"]).resolve()
    # -> "http://example.org/world/last-news?type=it,art"

resolve_uri() additionally parses the result with httpx.URL and checks
that it is an absolute or relative URI as requested.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from uritemplate_resolver.config import get_settings
from uritemplate_resolver.core import ParsedTemplate, UriKind
from uritemplate_resolver.exceptions import UriSyntaxError
from uritemplate_resolver.expander import expand
from uritemplate_resolver.parser import TemplateParser, variable_names

logger = logging.getLogger(__name__)


def to_uri(uri: str, kind: UriKind | str | None = None) -> httpx.URL:
    """Parse an expanded string as a URI of the given kind.

    Args:
        uri: The expanded template
        kind: ABSOLUTE (scheme required), RELATIVE (no scheme allowed)
            or RELATIVE_OR_ABSOLUTE. None = settings.default_uri_kind

    Raises:
        UriSyntaxError: if `uri` is not a legal URI of that kind
    """
    kind = UriKind(kind) if kind is not None else get_settings().default_uri_kind

    try:
        url = httpx.URL(uri)
    except httpx.InvalidURL as e:
        logger.debug("[RESOLVER] %r is not a valid URI: %s", uri, e)
        raise UriSyntaxError(uri, kind.value, str(e)) from e

    if kind is UriKind.ABSOLUTE and not url.scheme:
        raise UriSyntaxError(uri, kind.value, "a scheme is required")
    if kind is UriKind.RELATIVE and url.scheme:
        raise UriSyntaxError(uri, kind.value, "a scheme is not allowed")
    return url


class UriTemplate:
    """A parsed URI template.

    Parsing happens in the constructor, so a malformed template fails
    immediately with UriTemplateParseError. The parsed components are
    immutable and the instance can be resolved concurrently.
    """

    def __init__(self, template: str):
        self._template = template
        self._components = TemplateParser(template).parse()
        self._variable_names = variable_names(self._components)

    @property
    def template(self) -> str:
        return self._template

    @property
    def components(self) -> ParsedTemplate:
        return self._components

    @property
    def variable_names(self) -> tuple[str, ...]:
        """Names referenced by the template, in first-use order."""
        return self._variable_names

    def resolve(self, values: Mapping[str, Any] | None = None, /, **kwargs: Any) -> str:
        """Expand the template.

        Args:
            values: name -> str | sequence of str | mapping of str to str
            **kwargs: Extra values; they win over `values` on name clashes

        Raises:
            InvalidValueTypeError: if a value has an unsupported type
        """
        if kwargs:
            values = {**(values or {}), **kwargs}
        return expand(self._components, values)

    def resolve_uri(
        self,
        values: Mapping[str, Any] | None = None,
        kind: UriKind | str | None = None,
        /,
        **kwargs: Any,
    ) -> httpx.URL:
        """Expand the template and parse the result as a URI.

        Raises:
            InvalidValueTypeError: if a value has an unsupported type
            UriSyntaxError: if the result is not a URI of the requested kind
        """
        return to_uri(self.resolve(values, **kwargs), kind)

    def get_resolver(self) -> "TemplateResolver":
        """Get a fluent binder for this template."""
        return TemplateResolver(self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UriTemplate):
            return self._template == other._template
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._template)

    def __str__(self) -> str:
        return self._template

    def __repr__(self) -> str:
        return f"UriTemplate({self._template!r})"


class TemplateResolver:
    """Accumulates variable bindings, then resolves once.

    Values are stored as given; type errors surface at resolve(). A binder
    belongs to one caller and is not meant to be shared between threads.
    """

    def __init__(self, template: UriTemplate | str):
        if isinstance(template, str):
            template = UriTemplate(template)
        self._template = template
        self._values: dict[str, Any] = {}

    @property
    def template(self) -> UriTemplate:
        return self._template

    @property
    def values(self) -> dict[str, Any]:
        """Copy of the current bindings."""
        return dict(self._values)

    def bind(self, name: str, value: Any) -> "TemplateResolver":
        """Bind one variable; rebinding a name replaces the old value."""
        self._values[name] = value
        return self

    def bind_all(self, values: Mapping[str, Any]) -> "TemplateResolver":
        """Bind every entry of a mapping."""
        self._values.update(values)
        return self

    def clear(self) -> "TemplateResolver":
        """Drop all bindings."""
        self._values.clear()
        return self

    def resolve(self) -> str:
        """Expand the template with the bound values."""
        return self._template.resolve(self._values)

    def resolve_uri(self, kind: UriKind | str | None = None) -> httpx.URL:
        """Expand the template with the bound values and parse it as a URI."""
        return self._template.resolve_uri(self._values, kind)


def resolve(template: str | UriTemplate, values: Mapping[str, Any] | None = None) -> str:
    """Parse (if needed) and expand a template in one call."""
    if isinstance(template, str):
        template = UriTemplate(template)
    return template.resolve(values)
