"""
Scope tree for identifier allocation.

A Scope holds the names claimed in one lexical generation context and an
upward link to its enclosing scope. Parents never see their children.

Two kinds of claim exist:

- claim: reserves a name in this scope only. Ancestors are neither
  consulted nor changed, so an inner scope may shadow an outer name.
- claim_global: checks the whole ancestor chain and records the chosen
  name in this scope and every ancestor up to the root.

The sanitizer, unique-name generator, suggestion function and language
profile are resolved per call by walking up to the nearest scope that
overrides them, falling back to the defaults in namescope.policies.
"""

from __future__ import annotations

from typing import Callable, FrozenSet, Iterator, Optional, Set, Union

from . import policies
from .profiles import GO, LanguageProfile, resolve_profile
from .utils.constants import MAX_UNIQUE_ATTEMPTS
from .utils.exceptions import UniqueNameExhaustedError
from .utils.logging import NamescopeLogger

SanitizerFunc = Callable[[str], str]
UniqueNameFunc = Callable[["Scope", str, bool], str]
SuggestFunc = Callable[[str], str]

scope_logger = NamescopeLogger(__name__)


class Scope:
    """
    A node in the naming tree.

    Root scopes are created directly; nested scopes come from derive().
    Claimed names are never released.
    """

    def __init__(
        self,
        sanitizer: Optional[SanitizerFunc] = None,
        unique_namer: Optional[UniqueNameFunc] = None,
        suggester: Optional[SuggestFunc] = None,
        profile: Union[LanguageProfile, str, None] = None,
    ):
        """
        Initialize a root scope.

        Args:
            sanitizer: Override for turning raw names into safe names
            unique_namer: Override for deriving the next free candidate
            suggester: Override for suggesting variable names
            profile: Language profile (instance or registered name)
        """
        self._parent: Optional[Scope] = None
        self._names: Set[str] = set()
        self._sanitizer = sanitizer
        self._unique_namer = unique_namer
        self._suggester = suggester
        self._profile = resolve_profile(profile) if profile is not None else None

    # =========================================================================
    # Tree structure
    # =========================================================================

    def derive(
        self,
        sanitizer: Optional[SanitizerFunc] = None,
        unique_namer: Optional[UniqueNameFunc] = None,
        suggester: Optional[SuggestFunc] = None,
        profile: Union[LanguageProfile, str, None] = None,
    ) -> "Scope":
        """Return a new child scope of this scope, inheriting what is not overridden."""
        child = type(self)(
            sanitizer=sanitizer,
            unique_namer=unique_namer,
            suggester=suggester,
            profile=profile,
        )
        child._parent = self
        return child

    @property
    def parent(self) -> Optional["Scope"]:
        return self._parent

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.ancestors())

    def ancestors(self) -> Iterator["Scope"]:
        """Iterate over enclosing scopes, nearest first."""
        scope = self._parent
        while scope is not None:
            yield scope
            scope = scope._parent

    @property
    def names(self) -> FrozenSet[str]:
        """Names claimed in this scope's own set."""
        return frozenset(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"Scope(depth={self.depth}, names={len(self._names)}, profile={self.profile.name!r})"

    # =========================================================================
    # Policy resolution
    # =========================================================================

    def _resolve(self, attr: str):
        scope: Optional[Scope] = self
        while scope is not None:
            value = getattr(scope, attr)
            if value is not None:
                return value
            scope = scope._parent
        return None

    @property
    def profile(self) -> LanguageProfile:
        return self._resolve("_profile") or GO

    def safe_name(self, name: str) -> str:
        sanitizer = self._resolve("_sanitizer")
        if sanitizer is not None:
            return sanitizer(name)
        return policies.sanitize(name, self.profile)

    def unique_name(self, name: str, recursive: bool) -> str:
        unique_namer = self._resolve("_unique_namer") or policies.next_candidate
        return unique_namer(self, name, recursive)

    def suggest(self, value: str) -> str:
        """
        Suggest a short variable name for value.

        The result is not claimed; pass it to claim() or claim_global().
        """
        suggester = self._resolve("_suggester")
        if suggester is not None:
            return suggester(value)
        return policies.suggest(value, self.profile)

    # =========================================================================
    # Claiming
    # =========================================================================

    def is_claimed(self, name: str, recursive: bool = False) -> bool:
        """
        Check whether name is taken.

        A non-recursive check only looks at this scope. A recursive check
        also looks at every ancestor.
        """
        if name in self._names:
            return True
        if not recursive or self._parent is None:
            return False
        return self._parent.is_claimed(name, True)

    def claim(self, name: str) -> str:
        """Reserve a safe form of name in this scope only and return it."""
        return self._define(self.safe_name(name), recursive=False)

    def claim_global(self, name: str) -> str:
        """Reserve a safe form of name in this scope and all of its ancestors."""
        return self._define(self.safe_name(name), recursive=True)

    def _define(self, safe_name: str, recursive: bool) -> str:
        candidate = safe_name
        for _ in range(MAX_UNIQUE_ATTEMPTS):
            if not self.is_claimed(candidate, recursive):
                self._insert(candidate, recursive)
                scope_logger.log_claim(self, safe_name, candidate, recursive)
                return candidate

            replacement = self.unique_name(candidate, recursive)
            scope_logger.log_collision(self, candidate, replacement)
            candidate = replacement

        scope_logger.log_exhausted(safe_name, MAX_UNIQUE_ATTEMPTS)
        raise UniqueNameExhaustedError(safe_name, MAX_UNIQUE_ATTEMPTS)

    def _insert(self, name: str, recursive: bool) -> None:
        scope: Optional[Scope] = self
        while scope is not None:
            scope._names.add(name)
            if not recursive:
                break
            scope = scope._parent


def new_scope(config=None, **overrides) -> Scope:
    """
    Create a root scope using the configured language profile.

    Args:
        config: NamescopeConfig to read the profile from; defaults to the
            global configuration
        **overrides: Policy overrides passed through to Scope
    """
    if config is None:
        from .utils.config import get_config

        config = get_config()
    overrides.setdefault("profile", config.profile())
    return Scope(**overrides)
