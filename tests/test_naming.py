"""
Tests for Package Name Normalization.

Verifies that:
1. Scoped names lose their scope, unscoped names pass through.
2. PascalCase conversion splits on separators and case transitions.
3. Invalid package names are rejected.
"""

import pytest

from pectin.naming import name_to_pascal_case, safe_name, split_words, to_pascal_case


@pytest.mark.parametrize(
  "name, expected",
  [
    ("react", "react"),
    ("@babel/runtime", "runtime"),
    ("@myscope/my-cool-pkg", "my-cool-pkg"),
    ("@scope/cool.thing", "cool.thing"),
  ],
)
def test_safe_name_strips_scope(name, expected):
  assert safe_name(name) == expected


@pytest.mark.parametrize(
  "name",
  ["", "@scope/", "has space", ".hidden", "_private", "@scope/_private", "a/b", "@unscoped", "café", "foo:bar", "foo%bar"],
)
def test_safe_name_rejects_invalid(name):
  with pytest.raises(ValueError):
    safe_name(name)


def test_safe_name_rejects_non_string():
  with pytest.raises(TypeError):
    safe_name(None)


@pytest.mark.parametrize(
  "text, expected",
  [
    ("simple", "Simple"),
    ("my-pkg", "MyPkg"),
    ("cool.thing", "CoolThing"),
    ("foo_bar baz", "FooBarBaz"),
    ("fooBar", "FooBar"),
    ("FOO-BAR", "FooBar"),
    ("XMLHttpRequest", "XmlHttpRequest"),
    ("d3-scale", "D3Scale"),
    ("--leading--trailing--", "LeadingTrailing"),
  ],
)
def test_to_pascal_case(text, expected):
  assert to_pascal_case(text) == expected


def test_split_words_case_transitions():
  assert split_words("reactDOMServer") == ["react", "DOM", "Server"]


def test_to_pascal_case_without_alphanumerics_is_empty():
  assert to_pascal_case("-._") == ""


@pytest.mark.parametrize(
  "name, expected",
  [
    ("@myscope/my-cool-pkg", "MyCoolPkg"),
    ("simple", "Simple"),
    ("@scope/cool.thing", "CoolThing"),
    ("react-dom", "ReactDom"),
    ("lodash.debounce", "LodashDebounce"),
  ],
)
def test_name_to_pascal_case(name, expected):
  assert name_to_pascal_case(name) == expected


@pytest.mark.parametrize("name", ["café", "foo:bar", "foo%bar", "@scope/na me"])
def test_name_to_pascal_case_rejects_url_unsafe_names(name):
  """
  Scenario: Name contains characters npm does not allow in URLs.
  Expectation: Rejected instead of silently dropping characters.
  """
  with pytest.raises(ValueError):
    name_to_pascal_case(name)


@pytest.mark.parametrize("name, expected", [("JSONStream", "JsonStream"), ("~tilde-pkg", "TildePkg")])
def test_legacy_and_tilde_names_accepted(name, expected):
  assert name_to_pascal_case(name) == expected
