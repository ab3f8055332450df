"""Policies for resolving goal and activity keys against their tables."""

from collections.abc import Callable, Mapping
from typing import TypeVar

T = TypeVar("T")

LookupPolicy = Callable[[Mapping[str, T], str | None, T], T]


class UnknownKeyError(ValueError):
    """Raised by the strict policy for keys missing from a table."""

    def __init__(self, key: str | None, choices: list[str]) -> None:
        super().__init__(f"Unknown key {key!r}; expected one of {', '.join(choices)}")
        self.key = key
        self.choices = choices


def lenient_lookup(table: Mapping[str, T], key: str | None, default: T) -> T:
    """Return the table value, or ``default`` when the key is unknown."""
    if key is None:
        return default
    return table.get(key, default)


def strict_lookup(table: Mapping[str, T], key: str | None, default: T) -> T:
    """Return the table value, raising UnknownKeyError for unknown keys."""
    if key is None or key not in table:
        raise UnknownKeyError(key, list(table))
    return table[key]


POLICIES: dict[str, LookupPolicy] = {
    "lenient": lenient_lookup,
    "strict": strict_lookup,
}


def get_policy(name: str) -> LookupPolicy:
    """Return the lookup policy registered under ``name``."""
    try:
        return POLICIES[name]
    except KeyError as exc:
        raise UnknownKeyError(name, list(POLICIES)) from exc
