"""
Visibility transforms.

Convert identifiers between the public and private forms of the target
language's visibility convention (a leading uppercase letter marks a
public name).
"""

from __future__ import annotations

from .policies import lower_char, upper_char
from .profiles import GO, LanguageProfile
from .utils.exceptions import InvalidIdentifierError, NoPublicFormError


def to_public(name: str, profile: LanguageProfile = GO) -> str:
    """
    Return the public form of name.

    Leading characters that cannot be capitalized are stripped until one
    can, so "_x" becomes "X".

    Raises:
        InvalidIdentifierError: If name is not a legal identifier
        NoPublicFormError: If no letter of name has an uppercase form
    """
    if not profile.is_identifier(name):
        raise InvalidIdentifierError(name, "exported")

    if profile.is_public(name):
        return name

    rest = name
    while rest:
        candidate = upper_char(rest[0]) + rest[1:]
        if profile.is_public(candidate):
            return candidate
        rest = rest[1:]

    raise NoPublicFormError(name)


def to_private(name: str, profile: LanguageProfile = GO) -> str:
    """
    Return the private form of name by lowercasing its leading letter.

    Raises:
        InvalidIdentifierError: If name is not a legal identifier
    """
    if not profile.is_identifier(name):
        raise InvalidIdentifierError(name, "unexported")

    if not profile.is_public(name):
        return name

    return lower_char(name[0]) + name[1:]
