"""Tests for the UriTemplate facade, the fluent binder and URI conversion."""

import uuid

import httpx
import pytest

from uritemplate_resolver import (
    InvalidValueTypeError,
    TemplateResolver,
    UriKind,
    UriSyntaxError,
    UriTemplate,
    UriTemplateParseError,
    configure,
    reset_settings,
    resolve,
    to_uri,
)

COMPLEX_VALUES = {
    "paths": ["foo", "bar"],
    "q1": "abc",
    "f": {"key1": "val1", "key2": None},
}


@pytest.fixture(autouse=True)
def _default_settings():
    reset_settings()
    yield
    reset_settings()


class TestUriTemplate:
    def test_resolve(self):
        template = UriTemplate("http://example.org/{area}/last-news{?type,count}")
        uri = template.resolve({"area": "world", "type": "actual", "count": "10"})
        assert uri == "http://example.org/world/last-news?type=actual&count=10"

    def test_resolve_with_keywords(self):
        template = UriTemplate("{/a,b}")
        assert template.resolve({"a": "x"}, b="y") == "/x/y"
        assert template.resolve({"a": "x", "b": "z"}, b="y") == "/x/y"

    def test_resolve_without_values(self):
        assert UriTemplate("http://example.com/foo{?q1,q2}").resolve() == "http://example.com/foo"

    def test_parse_error_raised_at_construction(self):
        template = "http://example.com/{path#!!}"
        with pytest.raises(UriTemplateParseError) as exc_info:
            UriTemplate(template)
        assert exc_info.value.position == 24
        assert exc_info.value.template == template

    def test_properties(self):
        template = UriTemplate("{/paths*}{?q1,q2}")
        assert template.template == "{/paths*}{?q1,q2}"
        assert template.variable_names == ("paths", "q1", "q2")
        assert len(template.components) == 2

    def test_equality_and_hash(self):
        assert UriTemplate("{a}") == UriTemplate("{a}")
        assert UriTemplate("{a}") != UriTemplate("{b}")
        assert len({UriTemplate("{a}"), UriTemplate("{a}")}) == 1

    def test_variables_named_like_parameters(self):
        template = UriTemplate("{/values,kind}")
        assert template.resolve(values="x", kind="y") == "/x/y"
        url = template.resolve_uri(None, UriKind.RELATIVE, values="x", kind="y")
        assert url == httpx.URL("/x/y")

    def test_str_and_repr(self):
        template = UriTemplate("{a}")
        assert str(template) == "{a}"
        assert repr(template) == "UriTemplate('{a}')"

    @pytest.mark.parametrize("value", [uuid.uuid4(), 42])
    def test_unsupported_value_types(self, value):
        template = UriTemplate("http://example.com/{guid}/{int}")
        with pytest.raises(InvalidValueTypeError) as exc_info:
            template.resolve({"guid": value})
        assert exc_info.value.name == "guid"


class TestTemplateResolver:
    def test_bind_chain(self):
        template = UriTemplate("http://example.org/{area}/last-news{?type}")
        uri = (
            template.get_resolver()
            .bind("area", "world")
            .bind("type", ["it", "music", "art"])
            .resolve()
        )
        assert uri == "http://example.org/world/last-news?type=it,music,art"

    def test_rebind_replaces_value(self):
        resolver = TemplateResolver("{a}").bind("a", "1").bind("a", "2")
        assert resolver.resolve() == "2"

    def test_bind_all_and_clear(self):
        resolver = TemplateResolver("{a}{b}").bind_all({"a": "1", "b": "2"})
        assert resolver.resolve() == "12"
        assert resolver.clear().resolve() == ""

    def test_values_is_a_copy(self):
        resolver = TemplateResolver("{a}").bind("a", "1")
        resolver.values["a"] = "changed"
        assert resolver.resolve() == "1"

    def test_bad_value_surfaces_at_resolve(self):
        resolver = TemplateResolver("{a}").bind("a", 1)
        with pytest.raises(InvalidValueTypeError):
            resolver.resolve()

    def test_binders_are_independent(self):
        template = UriTemplate("{a}")
        first = template.get_resolver().bind("a", "1")
        second = template.get_resolver().bind("a", "2")
        assert (first.resolve(), second.resolve()) == ("1", "2")
        assert first.template is template

    def test_resolve_uri(self):
        resolver = TemplateResolver("http://example.com{/paths*}").bind("paths", ["a", "b"])
        assert resolver.resolve_uri() == httpx.URL("http://example.com/a/b")


class TestResolveUri:
    def test_absolute(self):
        template = UriTemplate("http://example.com{/paths*}{?q1,q2}{#f*}")
        url = template.resolve_uri(COMPLEX_VALUES)
        assert isinstance(url, httpx.URL)
        assert url == httpx.URL("http://example.com/foo/bar?q1=abc#key1=val1,key2=")
        assert url.path == "/foo/bar"
        assert url.fragment == "key1=val1,key2="

    def test_relative(self):
        template = UriTemplate("{/paths*}{?q1,q2}{#f*}")
        url = template.resolve_uri(COMPLEX_VALUES, UriKind.RELATIVE_OR_ABSOLUTE)
        assert url == httpx.URL("/foo/bar?q1=abc#key1=val1,key2=")
        assert url.is_relative_url

    def test_relative_rejected_when_absolute_required(self):
        template = UriTemplate("{/paths*}")
        with pytest.raises(UriSyntaxError) as exc_info:
            template.resolve_uri(COMPLEX_VALUES)
        assert exc_info.value.uri == "/foo/bar"
        assert exc_info.value.kind == "absolute"

    def test_absolute_rejected_when_relative_required(self):
        with pytest.raises(UriSyntaxError):
            to_uri("http://example.com/", UriKind.RELATIVE)

    def test_kind_as_string(self):
        assert to_uri("/a", "relative") == httpx.URL("/a")

    def test_invalid_uri(self):
        template = UriTemplate("http://example.com:{port}/")
        with pytest.raises(UriSyntaxError) as exc_info:
            template.resolve_uri({"port": "abc"})
        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)

    def test_default_kind_from_settings(self):
        configure(default_uri_kind=UriKind.RELATIVE_OR_ABSOLUTE)
        assert UriTemplate("{/p}").resolve_uri({"p": "x"}) == httpx.URL("/x")

    @pytest.mark.parametrize("uri", ["urn:isbn:0451450523", "mailto:a@example.com"])
    def test_scheme_without_host_is_absolute(self, uri):
        assert to_uri(uri, UriKind.ABSOLUTE).scheme == uri.split(":")[0]

    @pytest.mark.parametrize("uri", ["urn:isbn:0451450523", "mailto:a@example.com"])
    def test_scheme_without_host_is_not_relative(self, uri):
        with pytest.raises(UriSyntaxError):
            to_uri(uri, UriKind.RELATIVE)

    def test_syntax_error_is_value_error(self):
        with pytest.raises(ValueError):
            to_uri("relative/path", UriKind.ABSOLUTE)


def test_module_level_resolve():
    assert resolve("http://example.com/{path}", {"path": "foo"}) == "http://example.com/foo"
    assert resolve(UriTemplate("{x}"), {"x": "y"}) == "y"
