# SPDX-License-Identifier: MIT
"""Exceptions raised while constructing or parsing semantic versions."""

from __future__ import annotations

from typing import Any


class VersionError(ValueError):
    """Base class for all semantic version errors."""


class InvalidComponentError(VersionError):
    """Raised when a Version is constructed from an invalid component.

    Attributes:
        field: Name of the offending component ("major", "minor", "patch",
            "prerelease" or "build")
        value: The rejected value or identifier
        message: Human-readable description
    """

    def __init__(self, field: str, value: Any, message: str = ""):
        self.field = field
        self.value = value
        self.message = message or f"Invalid {field}: {value!r}"
        super().__init__(self.message)


class InvalidVersionError(VersionError):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)
