"""Translate Laravel convention method names into the spelling callers use."""

from __future__ import annotations

import re

_SCOPE_RE = re.compile(r"^scope(.+$)")
_ACCESSOR_RE = re.compile(r"^(get|set)(.+)Attribute$")
_WORD_START_RE = re.compile(r"(^|\s)(\S)")
_WHITESPACE_RE = re.compile(r"\s+")
_BEFORE_UPPER_RE = re.compile(r"(.)(?=[A-Z])")
_LOWER_ONLY_RE = re.compile(r"[a-z]+")


def studly(value: str) -> str:
    """``foo_bar-baz`` -> ``FooBarBaz``, matching ``Str::studly``."""
    words = value.replace("-", " ").replace("_", " ").split(" ")
    return "".join(word[:1].upper() + word[1:] for word in words)


def camel(value: str) -> str:
    """``Active_users`` -> ``activeUsers``, matching ``Str::camel``."""
    word = studly(value)
    return word[:1].lower() + word[1:]


def snake(value: str, delimiter: str = "_") -> str:
    """``FirstName`` -> ``first_name``, matching ``Str::snake``."""
    if _LOWER_ONLY_RE.fullmatch(value):
        return value
    value = _WORD_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), value)
    value = _WHITESPACE_RE.sub("", value)
    return _BEFORE_UPPER_RE.sub(lambda m: m.group(1) + delimiter, value).lower()


def mangle_method_name(name: str) -> str:
    """Return the name a caller would write to invoke the declared method ``name``.

    Query scopes (``scopeActive``) are called as ``active``; accessors and
    mutators (``getFirstNameAttribute``) surface as the ``first_name``
    attribute. Any other name is returned unchanged.
    """
    match = _SCOPE_RE.match(name)
    if match:
        return camel(match.group(1))

    match = _ACCESSOR_RE.match(name)
    if match:
        return snake(match.group(2))

    return name


__all__ = ["camel", "mangle_method_name", "snake", "studly"]
