"""
Default naming policies.

The scope tree composes three policies, each overridable per scope:

- sanitize: turn an arbitrary string into a legal, non-reserved identifier
- next_candidate: derive the next suffixed candidate for a taken name
- suggest: propose a short variable name from a longer string

All three are total apart from the fatal ceiling of next_candidate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from .profiles import GO, LanguageProfile, is_letter, is_mark, is_upper
from .utils.constants import (
    ESCAPE_PREFIX,
    FALLBACK_NAME,
    MAX_UNIQUE_ATTEMPTS,
    REPLACEMENT_CHARACTER,
    SURROGATE_MAX,
    SURROGATE_MIN,
)
from .utils.exceptions import UniqueNameExhaustedError
from .utils.logging import NamescopeLogger

if TYPE_CHECKING:
    from .scope import Scope

naming_logger = NamescopeLogger(__name__)


# =============================================================================
# Character Helpers
# =============================================================================

def lower_char(ch: str) -> str:
    """
    Lowercase one character.

    A mapping to a letter plus combining marks ("\u0130" -> "i\u0307")
    keeps only the letter. Any other multi-character mapping leaves ch
    unchanged.
    """
    lowered = ch.lower()
    if len(lowered) == 1:
        return lowered
    if is_letter(lowered[0]) and all(is_mark(c) for c in lowered[1:]):
        return lowered[0]
    return ch


def upper_char(ch: str) -> str:
    """Uppercase one character, keeping it when the mapping is not one-to-one."""
    raised = ch.upper()
    return raised if len(raised) == 1 else ch


def is_decoding_error(ch: str) -> bool:
    """Check whether ch marks malformed input (replacement char or lone surrogate)."""
    return ch == REPLACEMENT_CHARACTER or SURROGATE_MIN <= ord(ch) <= SURROGATE_MAX


def _as_text(value: Union[str, bytes]) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="surrogateescape")
    return value


# =============================================================================
# Name Sanitizer
# =============================================================================

def sanitize(raw: Union[str, bytes], profile: LanguageProfile = GO) -> str:
    """
    Turn an arbitrary string into a safe identifier.

    Characters outside the identifier set are dropped, an empty result
    becomes the fallback name, and reserved words or names with an
    illegal leading character are escaped with a leading underscore.

    Args:
        raw: Candidate name, possibly containing illegal characters
        profile: Lexical rules of the target language

    Returns:
        A legal identifier for the profile
    """
    name = "".join(ch for ch in _as_text(raw) if profile.is_ident_char(ch))
    if not name:
        return FALLBACK_NAME

    if profile.is_reserved(name):
        name = ESCAPE_PREFIX + name

    head = name[0]
    if not is_letter(head) and head != profile.connector:
        name = ESCAPE_PREFIX + name

    return name


# =============================================================================
# Unique-Name Generator
# =============================================================================

def next_candidate(scope: "Scope", name: str, recursive: bool) -> str:
    """
    Derive the first free suffixed form of name.

    Tries name0, name1, ... against the scope's membership test.

    Raises:
        UniqueNameExhaustedError: If every candidate within the attempt
            ceiling is taken. This is fatal and must not be recovered.
    """
    safe_name = scope.safe_name(name)

    for index in range(MAX_UNIQUE_ATTEMPTS):
        candidate = f"{safe_name}{index}"
        if not scope.is_claimed(candidate, recursive):
            return candidate

    naming_logger.log_exhausted(name, MAX_UNIQUE_ATTEMPTS)
    raise UniqueNameExhaustedError(name, MAX_UNIQUE_ATTEMPTS)


# =============================================================================
# Suggestion Heuristic
# =============================================================================

def _word_initials(text: str) -> Union[str, None]:
    """Collect one lowercase letter per capitalised word, or None on an acronym."""
    first = text[0] if text else FALLBACK_NAME
    initials = [lower_char(first)]
    prev_upper = is_upper(first)

    for ch in text[1:]:
        if is_decoding_error(ch):
            return None
        cur_upper = is_upper(ch)
        if prev_upper and cur_upper:
            return None
        if cur_upper:
            initials.append(lower_char(ch))
        prev_upper = cur_upper

    return "".join(initials)


def _first_letter(text: str) -> str:
    for ch in text:
        if is_letter(ch):
            return lower_char(ch)
    return FALLBACK_NAME


def suggest(value: Union[str, bytes], profile: LanguageProfile = GO) -> str:
    """
    Suggest a short variable name for value.

    "TablePerson" becomes "tp" and "aPerson" becomes "ap". Acronym-like
    runs such as "HTTP", or malformed input, fall back to the first letter
    of the input.
    """
    text = _as_text(value)

    result = _word_initials(text)
    if result is None:
        result = _first_letter(text)

    if result == profile.connector:
        result = FALLBACK_NAME
    return sanitize(result, profile)
