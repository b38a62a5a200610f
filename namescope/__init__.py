"""
namescope: scoped identifier allocation for code generators

Code generators that invent variable and function names need identifiers
that are legal in the target language and never collide with names live
in enclosing scopes. namescope keeps a tree of scopes and hands out such
names.

Usage:
    from namescope import Scope

    module = Scope()
    fn = module.derive()
    fn.claim_global("Handler")          # reserved in fn and module
    fn.claim(fn.suggest("TablePerson")) # "tp", local to fn
"""

__version__ = "0.1.0"
__author__ = "Namescope Team"
__email__ = "namescope@example.com"

# Public API exports
from .scope import Scope, new_scope

from .policies import sanitize, next_candidate, suggest

from .visibility import to_public, to_private

from .profiles import (
    LanguageProfile,
    GO,
    PYTHON,
    CHOREO,
    get_profile,
    register_profile,
    list_profiles,
)

from .locator import (
    BuildDescription,
    SourceFile,
    DeclarationLocator,
    SourceDeclarationLocator,
    locate_from_environment,
)

from .utils.exceptions import (
    NamescopeError,
    InvalidIdentifierError,
    NoPublicFormError,
    UniqueNameExhaustedError,
    ProfileError,
    DeclarationNotFoundError,
    AmbiguousDeclarationError,
)

from .utils.config import get_config, NamescopeConfig

__all__ = [
    "Scope",
    "new_scope",
    "sanitize",
    "next_candidate",
    "suggest",
    "to_public",
    "to_private",
    "LanguageProfile",
    "GO",
    "PYTHON",
    "CHOREO",
    "get_profile",
    "register_profile",
    "list_profiles",
    "BuildDescription",
    "SourceFile",
    "DeclarationLocator",
    "SourceDeclarationLocator",
    "locate_from_environment",
    "NamescopeError",
    "InvalidIdentifierError",
    "NoPublicFormError",
    "UniqueNameExhaustedError",
    "ProfileError",
    "DeclarationNotFoundError",
    "AmbiguousDeclarationError",
    "get_config",
    "NamescopeConfig",
]
