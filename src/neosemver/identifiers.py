# SPDX-License-Identifier: MIT
"""Validation of pre-release and build identifiers.

An identifier is a non-empty run of ASCII alphanumerics and hyphens
(``[0-9A-Za-z-]``). Purely numeric identifiers must not carry a leading zero
unless they are exactly ``"0"``. The leading-zero rule is applied to build
identifiers as well, which is stricter than SemVer 2.0.0 requires.
"""

from __future__ import annotations

from typing import Iterable

from .errors import InvalidComponentError

_DIGITS = frozenset("0123456789")
_IDENTIFIER_CHARS = frozenset(
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "-"
)


def is_numeric(identifier: str) -> bool:
    """Return True if the identifier is non-empty and made only of ASCII digits."""
    return bool(identifier) and all(char in _DIGITS for char in identifier)


def check_identifiers(identifiers: Iterable[str], name: str) -> tuple[str, ...]:
    """Validate a sequence of identifiers and return it as a tuple.

    Args:
        identifiers: Candidate identifiers, e.g. ``["alpha", "1"]``
        name: Field being validated ("prerelease" or "build"), used in errors

    Returns:
        The identifiers, unchanged, as an immutable tuple. An empty input
        yields an empty tuple.

    Raises:
        InvalidComponentError: If any identifier is empty, contains a
            character outside ``[0-9A-Za-z-]`` or is numeric with a leading zero

    Examples:
        >>> check_identifiers(["alpha", "1"], "prerelease")
        ('alpha', '1')
        >>> check_identifiers([], "build")
        ()
    """
    if isinstance(identifiers, str):
        raise InvalidComponentError(
            name, identifiers, f"{name}: Expected a sequence of identifiers, got a string"
        )

    try:
        result = tuple(identifiers)
    except TypeError as exc:
        raise InvalidComponentError(
            name,
            identifiers,
            f"{name}: Expected a sequence of identifiers, got {type(identifiers).__name__}",
        ) from exc
    for identifier in result:
        if not isinstance(identifier, str):
            raise InvalidComponentError(
                name,
                identifier,
                f"{name}: Identifiers must be strings, got {type(identifier).__name__}",
            )
        if not identifier:
            raise InvalidComponentError(name, identifier, f"{name}: Identifiers must not be empty")
        if not all(char in _IDENTIFIER_CHARS for char in identifier):
            raise InvalidComponentError(
                name,
                identifier,
                f"{name}: Identifier {identifier!r} must be ASCII alphanumerics or hyphens",
            )
        if len(identifier) > 1 and identifier[0] == "0" and is_numeric(identifier):
            raise InvalidComponentError(
                name,
                identifier,
                f"{name}: Numeric identifier {identifier!r} must not have a leading zero",
            )
    return result
