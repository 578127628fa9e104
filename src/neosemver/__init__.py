# SPDX-License-Identifier: MIT
"""Semantic version parsing, validation and precedence.

This package implements the Semantic Versioning 2.0.0 specification:
parsing, validated construction, exact equality and SemVer precedence ordering.

Example:
    >>> import functools
    >>> from neosemver import Version, parse_version, standard_ordering
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.prerelease
    ('alpha', '1')
    >>> version == Version(1, 2, 3, prerelease=["alpha", "1"], build=["build", "456"])
    True
    >>>
    >>> versions = [parse_version("1.0.0"), parse_version("1.0.0-rc.1")]
    >>> [str(v) for v in sorted(versions, key=functools.cmp_to_key(standard_ordering))]
    ['1.0.0-rc.1', '1.0.0']
"""

import logging

__version__ = "0.1.0"

from .errors import (
    VersionError,
    InvalidComponentError,
    InvalidVersionError,
)
from .identifiers import (
    check_identifiers,
    is_numeric,
)
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .compare import (
    compare_identifiers,
    compare_versions,
    standard_ordering,
    version_key,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "VersionError",
    "InvalidComponentError",
    "InvalidVersionError",
    # Identifier validation
    "check_identifiers",
    "is_numeric",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Version comparison
    "compare_identifiers",
    "compare_versions",
    "standard_ordering",
    "version_key",
]
