"""Parsers for the list-valued properties of report parameters."""

from __future__ import annotations

import re

from reporting.domain.entities import ParameterDependency

_UNESCAPED_COMMA = re.compile(r"(?<!\\),")
_ESCAPED_COMMA = "\\,"
_DEPENDENCY_SEPARATOR = ":"
_DEPENDENCY_PARTS = 3


class MalformedDependencyError(ValueError):
    """Raised when a dependency entry is not a ``dependency:property:placeholder`` triple."""

    def __init__(self, entry: str) -> None:
        self.entry = entry
        super().__init__(f"Malformed dependency '{entry}'")


def split_list_property(value: str | None) -> list[str]:
    """Split ``value`` on unescaped commas and unescape ``\\,`` in every token.

    Trailing empty tokens are dropped, so ``None``, ``""`` and ``","`` all
    produce an empty list. An empty string yields ``[]``, not ``[""]``.
    """

    if value is None:
        return []
    tokens = [token.replace(_ESCAPED_COMMA, ",") for token in _UNESCAPED_COMMA.split(value)]
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def parse_dependency(entry: str) -> ParameterDependency:
    parts = entry.split(_DEPENDENCY_SEPARATOR)
    if len(parts) != _DEPENDENCY_PARTS or not all(parts):
        raise MalformedDependencyError(entry)
    dependency, property_name, placeholder = parts
    return ParameterDependency(
        dependency=dependency, property=property_name, placeholder=placeholder
    )


def parse_dependencies(value: str | None) -> list[ParameterDependency]:
    """Parse a comma separated list of ``dependency:property:placeholder`` entries."""

    return [parse_dependency(entry) for entry in split_list_property(value)]


__all__ = [
    "MalformedDependencyError",
    "parse_dependencies",
    "parse_dependency",
    "split_list_property",
]
