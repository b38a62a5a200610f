"""
Target-language lexical profiles.

A LanguageProfile describes the lexical rules the naming policies must
respect for one output language: which characters may appear in an
identifier, which words are reserved, which names are predeclared, and
how public identifiers are recognised. The scope tree never interprets a
grammar; it only consults the profile it resolves.
"""

from __future__ import annotations

import builtins
import keyword
import unicodedata
from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Iterable, List

from .utils.constants import CONNECTOR, DEFAULT_PROFILE
from .utils.exceptions import ProfileError


def is_letter(ch: str) -> bool:
    """Check whether a single character is a Unicode letter."""
    return unicodedata.category(ch).startswith("L")


def is_number(ch: str) -> bool:
    """Check whether a single character is a Unicode number."""
    return unicodedata.category(ch).startswith("N")


def is_upper(ch: str) -> bool:
    """Check whether a single character is an uppercase letter (category Lu)."""
    return unicodedata.category(ch) == "Lu"


def is_mark(ch: str) -> bool:
    return unicodedata.category(ch).startswith("M")


@dataclass(frozen=True)
class LanguageProfile:
    """Lexical policy for one target language."""

    name: str
    reserved_words: FrozenSet[str] = field(default_factory=frozenset)
    predeclared: FrozenSet[str] = field(default_factory=frozenset)
    connector: str = CONNECTOR

    def is_ident_char(self, ch: str) -> bool:
        return ch == self.connector or is_letter(ch) or is_number(ch)

    def is_reserved(self, name: str) -> bool:
        """Check whether name is a reserved word or a predeclared name."""
        return name in self.reserved_words or name in self.predeclared

    def is_identifier(self, name: str) -> bool:
        """
        Check whether name is a legal identifier.

        A legal identifier is non-empty, starts with a letter or the
        connector, contains only identifier characters and is not a
        reserved word. Predeclared names are legal identifiers; they can
        be shadowed.
        """
        if not name:
            return False
        head = name[0]
        if head != self.connector and not is_letter(head):
            return False
        if not all(self.is_ident_char(ch) for ch in name):
            return False
        return name not in self.reserved_words

    def is_public(self, name: str) -> bool:
        """Check whether name follows the public visibility convention."""
        return bool(name) and is_upper(name[0])

    def with_reserved(self, names: Iterable[str]) -> "LanguageProfile":
        """Return a copy of this profile with additional reserved words."""
        extra = frozenset(names)
        if not extra:
            return self
        return replace(self, reserved_words=self.reserved_words | extra)


# =============================================================================
# Built-in Profiles
# =============================================================================

GO_KEYWORDS = frozenset(
    [
        "break", "case", "chan", "const", "continue", "default", "defer",
        "else", "fallthrough", "for", "func", "go", "goto", "if", "import",
        "interface", "map", "package", "range", "return", "select", "struct",
        "switch", "type", "var",
    ]
)

GO_PREDECLARED = frozenset(
    [
        # types
        "any", "bool", "byte", "complex64", "complex128", "error", "float32",
        "float64", "int", "int8", "int16", "int32", "int64", "rune", "string",
        "uint", "uint8", "uint16", "uint32", "uint64", "uintptr",
        # constants and zero value
        "true", "false", "iota", "nil",
        # functions
        "append", "cap", "close", "complex", "copy", "delete", "imag", "len",
        "make", "new", "panic", "print", "println", "real", "recover",
    ]
)

PYTHON_KEYWORDS = frozenset(keyword.kwlist) | frozenset(
    name for name in getattr(keyword, "softkwlist", []) if name != CONNECTOR
)

PYTHON_PREDECLARED = frozenset(name for name in dir(builtins) if not name.startswith(CONNECTOR))

C_KEYWORDS = frozenset(
    [
        "auto", "bool", "break", "case", "char", "class", "const", "constexpr",
        "continue", "default", "delete", "do", "double", "else", "enum",
        "extern", "false", "float", "for", "goto", "if", "inline", "int",
        "long", "namespace", "new", "nullptr", "operator", "private",
        "protected", "public", "register", "return", "short", "signed",
        "sizeof", "static", "struct", "switch", "template", "this", "true",
        "typedef", "typename", "union", "unsigned", "using", "virtual",
        "void", "volatile", "while",
    ]
)

# Choreo DSL constructs emitted by kernel generators
CHOREO_KEYWORDS = C_KEYWORDS | frozenset(
    [
        "parallel", "foreach", "local", "shared", "global", "wait", "dma",
        "chunkat", "at", "span", "data", "select", "call", "mdspan",
        "with", "in", "by",
    ]
)

CHOREO_PREDECLARED = frozenset(
    [
        "f16", "f32", "f64", "bf16", "s8", "s16", "s32", "s64", "u8", "u16",
        "u32", "u64", "size_t", "int8_t", "int16_t", "int32_t", "int64_t",
        "uint8_t", "uint16_t", "uint32_t", "uint64_t", "half",
    ]
)

GO = LanguageProfile("go", GO_KEYWORDS, GO_PREDECLARED)
PYTHON = LanguageProfile("python", PYTHON_KEYWORDS, PYTHON_PREDECLARED)
CHOREO = LanguageProfile("choreo", CHOREO_KEYWORDS, CHOREO_PREDECLARED)


# =============================================================================
# Profile Registry
# =============================================================================

_profiles: Dict[str, LanguageProfile] = {p.name: p for p in (GO, PYTHON, CHOREO)}


def register_profile(profile: LanguageProfile, replace_existing: bool = False) -> None:
    """
    Register a language profile under its name.

    Args:
        profile: Profile to register
        replace_existing: Allow overwriting a profile with the same name

    Raises:
        ValueError: If the name is taken and replace_existing is False
    """
    if profile.name in _profiles and not replace_existing:
        raise ValueError(f"Language profile '{profile.name}' is already registered")
    _profiles[profile.name] = profile


def get_profile(name: str = DEFAULT_PROFILE) -> LanguageProfile:
    """Look up a registered profile by name."""
    try:
        return _profiles[name]
    except KeyError:
        raise ProfileError(name, list_profiles()) from None


def list_profiles() -> List[str]:
    return sorted(_profiles)


def resolve_profile(profile) -> LanguageProfile:
    """Accept either a profile instance or a registered profile name."""
    if isinstance(profile, LanguageProfile):
        return profile
    return get_profile(profile)
