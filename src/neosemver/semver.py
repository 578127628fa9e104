# SPDX-License-Identifier: MIT
"""Semantic version value type and parser.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.11, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101

Equality and hashing cover every field, build metadata included, so two
versions that differ only in build metadata are not equal. Precedence ignores
build metadata and lives in :mod:`neosemver.compare`; ``Version`` itself
defines no ordering operators.
"""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass
from typing import Any

from .errors import InvalidComponentError, InvalidVersionError
from .identifiers import check_identifiers

logger = logging.getLogger(__name__)

# [0-9] rather than \d so only ASCII digits match; \Z so a trailing newline does not.
SEMVER_PATTERN = re.compile(
    r"\A(?P<major>[0-9]+)"
    r"\.(?P<minor>[0-9]+)"
    r"\.(?P<patch>[0-9]+)"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<buildmetadata>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?\Z"
)


def _check_number(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidComponentError(
            name, value, f"{name}: Must be an integer, got {type(value).__name__}"
        )
    limit = sys.get_int_max_str_digits() if hasattr(sys, "get_int_max_str_digits") else 0
    # 10**limit > 2**(3 * limit), so only very large values need the exact check.
    if limit and abs(value).bit_length() > 3 * limit and abs(value) >= 10**limit:
        raise InvalidComponentError(
            name, value, f"{name}: Must have at most {limit} digits to be rendered"
        )
    if value < 0:
        raise InvalidComponentError(name, value, f"{name}: Must be non-negative, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g. ``("alpha", "1")``), empty
            for a normal version
        build: Build metadata identifiers (e.g. ``("build", "123")``), empty
            when absent

    Raises:
        InvalidComponentError: If a number is negative or an identifier is
            not valid

    Examples:
        >>> Version(1, 2, 3, prerelease=["alpha", "1"])
        Version(major=1, minor=2, patch=3, prerelease=('alpha', '1'), build=())
        >>> str(Version(1, 0, 2, prerelease=["pre"], build=["build"]))
        '1.0.2-pre+build'
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _check_number(self.major, "major")
        _check_number(self.minor, "minor")
        _check_number(self.patch, "patch")
        object.__setattr__(self, "prerelease", check_identifiers(self.prerelease, "prerelease"))
        object.__setattr__(self, "build", check_identifiers(self.build, "build"))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The whole string must match ``MAJOR.MINOR.PATCH[-prerelease][+build]``;
    surrounding whitespace is not stripped.

    Args:
        version_string: A string following semantic versioning format

    Returns:
        A validated Version object

    Raises:
        InvalidVersionError: If the string does not follow semantic
            versioning. The original text is kept on ``error.version``.

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> parse_version("1.0.0-alpha+1")
        Version(major=1, minor=0, patch=0, prerelease=('alpha',), build=('1',))
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    match = SEMVER_PATTERN.fullmatch(version_string)
    if match is None:
        logger.debug("Rejected version %r: does not match grammar", version_string)
        raise InvalidVersionError(version_string)

    prerelease = match.group("prerelease")
    build = match.group("buildmetadata")
    try:
        return Version(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=prerelease.split(".") if prerelease is not None else (),
            build=build.split(".") if build is not None else (),
        )
    except ValueError as exc:
        # InvalidComponentError is a ValueError; so is int() on an oversized digit string.
        logger.debug("Rejected version %r: %s", version_string, exc)
        raise InvalidVersionError(version_string) from exc


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-01")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
