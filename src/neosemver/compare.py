# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0 ordering semantics.

1. Major, minor and patch are compared numerically, in that order.
2. A pre-release version has lower precedence than the normal version:
   1.0.0-alpha < 1.0.0
3. Pre-release identifiers are compared left to right:
   - numeric identifiers are compared numerically
   - identifiers with letters or hyphens are compared in ASCII order
   - numeric identifiers sort below non-numeric ones
   - a longer list wins when all preceding identifiers are equal

   1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta
   < 1.0.0-beta.2 < 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0

Build metadata never affects precedence.
"""

from __future__ import annotations

from typing import Union

from .identifiers import is_numeric
from .semver import Version, parse_version


def _sign(a, b) -> int:
    return (a > b) - (a < b)


def compare_identifiers(a: str, b: str) -> int:
    """Compare two pre-release identifiers.

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b
    """
    a_numeric = is_numeric(a)
    b_numeric = is_numeric(b)

    if a_numeric and b_numeric:
        # No leading zeros, so the longer digit string is the larger number.
        if len(a) != len(b):
            return _sign(len(a), len(b))
        return _sign(a, b)
    if a_numeric:
        return -1
    if b_numeric:
        return 1
    return _sign(a, b)


def standard_ordering(a: Version, b: Version) -> int:
    """Compare two versions by SemVer precedence.

    Suitable for ``functools.cmp_to_key``. Build metadata is ignored, so two
    versions can compare as 0 here while still being unequal under ``==``.

    Returns:
        -1 if a < b, 0 if a and b have the same precedence, 1 if a > b

    Examples:
        >>> import functools
        >>> versions = [Version(2, 1, 0), Version(1, 0, 0), Version(2, 0, 0)]
        >>> [str(v) for v in sorted(versions, key=functools.cmp_to_key(standard_ordering))]
        ['1.0.0', '2.0.0', '2.1.0']
    """
    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(a, attr), getattr(b, attr))
        if result:
            return result

    if a.is_prerelease != b.is_prerelease:
        return -1 if a.is_prerelease else 1

    for ident_a, ident_b in zip(a.prerelease, b.prerelease):
        result = compare_identifiers(ident_a, ident_b)
        if result:
            return result

    return _sign(len(a.prerelease), len(b.prerelease))


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have the same precedence
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2
    return standard_ordering(v1, v2)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, ordered the same way as standard_ordering.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # A normal version is (1,), which sorts after every (0, ...) pre-release key.
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for identifier in v.prerelease:
            if is_numeric(identifier):
                parts.append((0, len(identifier), identifier))
            else:
                parts.append((1, 0, identifier))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)
