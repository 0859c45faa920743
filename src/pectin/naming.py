"""
Package Name Normalization.

Turns npm package identifiers (optionally scoped, e.g. ``@scope/my-pkg``)
into PascalCase identifiers usable as global variable names in UMD bundles.

Examples:
    >>> name_to_pascal_case("@myscope/my-cool-pkg")
    'MyCoolPkg'
    >>> name_to_pascal_case("lodash.debounce")
    'LodashDebounce'
"""

import re
from typing import List

# npm URL-safe segment; uppercase is still accepted for legacy packages.
_URL_SAFE_PART = r"[A-Za-z0-9~-][A-Za-z0-9._~-]*"

# Optional "@scope/" prefix followed by the bare package name.
_PACKAGE_NAME_RE = re.compile(rf"(?:@(?P<scope>{_URL_SAFE_PART})/)?(?P<name>{_URL_SAFE_PART})")

# Word segments: acronyms (XML in XMLHttp), capitalised or lower words, digit runs.
_SEGMENT_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z0-9]+|[0-9]+")


def safe_name(name: str) -> str:
  """
  Validates a package identifier and removes its scope, if any.

  Args:
      name (str): Package name, e.g. ``react`` or ``@babel/runtime``.

  Returns:
      str: The unscoped portion of the name (``runtime`` for ``@babel/runtime``).

  Raises:
      TypeError: If ``name`` is not a string.
      ValueError: If ``name`` is not a valid npm package name.
  """
  if not isinstance(name, str):
    raise TypeError(f"Package name must be a string, got {type(name).__name__}")

  match = _PACKAGE_NAME_RE.fullmatch(name)
  if not match:
    raise ValueError(f"Invalid package name: '{name}'")

  if match.group("scope") is not None:
    return name[name.index("/") + 1 :]
  return name


def split_words(text: str) -> List[str]:
  """
  Splits text on separators and case transitions.

  Args:
      text (str): Arbitrary identifier text (``my-cool_pkg``, ``fooBar``).

  Returns:
      List[str]: The raw word segments, case preserved.
  """
  return _SEGMENT_RE.findall(text)


def to_pascal_case(text: str) -> str:
  """
  Converts text to PascalCase.

  Each word segment is lower-cased, then its first character upper-cased.

  Args:
      text (str): The text to convert.

  Returns:
      str: PascalCase identifier (empty if the text holds no alphanumerics).
  """
  return "".join(word.capitalize() for word in split_words(text))


def name_to_pascal_case(name: str) -> str:
  """
  Derives the global variable name for a package.

  Args:
      name (str): Package or dependency name, possibly scoped.

  Returns:
      str: PascalCase identifier with the scope removed.
  """
  return to_pascal_case(safe_name(name))
