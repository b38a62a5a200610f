"""
Custom exception definitions.

This module defines the exception hierarchy for namescope errors.
Validation and semantic failures of the visibility transform are
reported to the caller; exhaustion of the unique-name search is fatal.
"""

from typing import Optional


class NamescopeError(Exception):
    """
    Base exception for all namescope errors.

    Carries a human-readable message plus optional structured details
    that are rendered into the string form.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize namescope error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class InvalidIdentifierError(NamescopeError, ValueError):
    """Raised when a visibility transform receives a string that is not an identifier."""

    def __init__(self, name: str, operation: str = ""):
        message = f"{name!r} is not a valid identifier"
        if operation:
            message = f"failed to create {operation} identifier: {message}"
        super().__init__(message, {"name": name})
        self.name = name


class NoPublicFormError(NamescopeError, ValueError):
    """
    Raised when an identifier has no public form.

    The input is a legal identifier, but none of its letters can be
    capitalized into a public-looking name (all underscores or digits,
    or letters from a script without case).
    """

    def __init__(self, name: str):
        super().__init__(
            f"failed to create exported identifier for {name!r}: input does not contain any uppercase letters",
            {"name": name},
        )
        self.name = name


class UniqueNameExhaustedError(NamescopeError, RuntimeError):
    """
    Raised when no unique candidate exists within the attempt ceiling.

    This signals a defect in a policy override or in the caller's usage.
    It is never caught inside namescope and should terminate the
    generation run.
    """

    def __init__(self, name: str, attempts: int):
        super().__init__(
            f"failed to find safe, unique, name for root {name!r} after {attempts} attempts",
            {"name": name, "attempts": attempts},
        )
        self.name = name
        self.attempts = attempts


class ProfileError(NamescopeError, KeyError):
    """Raised when an unknown language profile is requested."""

    def __init__(self, name: str, available: Optional[list] = None):
        details = {"available": ", ".join(available)} if available else None
        super().__init__(f"unknown language profile {name!r}", details)
        self.name = name


class LocatorError(NamescopeError):
    """Base class for declaration locator failures."""


class DeclarationNotFoundError(LocatorError):
    """Raised when no named type declaration can be resolved."""

    def __init__(self, message: str, file_hint: Optional[str] = None, line: Optional[int] = None):
        details = {}
        if file_hint is not None:
            details["file"] = file_hint
        if line is not None:
            details["line"] = line
        super().__init__(message, details)
        self.file_hint = file_hint
        self.line = line


class AmbiguousDeclarationError(LocatorError):
    """Raised when a file hint maps to more than one source file."""

    def __init__(self, file_hint: str, candidates: list):
        super().__init__(
            f"multiple files found for {file_hint!r}",
            {"candidates": ", ".join(str(c) for c in candidates)},
        )
        self.file_hint = file_hint
        self.candidates = list(candidates)
