"""
Utils package for namescope.

This module provides the constants, exception hierarchy, logging and
configuration shared by the rest of the package.
"""

from .exceptions import (
    NamescopeError,
    InvalidIdentifierError,
    NoPublicFormError,
    UniqueNameExhaustedError,
    ProfileError,
    LocatorError,
    DeclarationNotFoundError,
    AmbiguousDeclarationError,
)
from .constants import *

from .config import (
    NamescopeConfig,
    NamingConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)

from .logging import get_logger, setup_logging, NamescopeLogger

__all__ = [
    # Exceptions
    "NamescopeError",
    "InvalidIdentifierError",
    "NoPublicFormError",
    "UniqueNameExhaustedError",
    "ProfileError",
    "LocatorError",
    "DeclarationNotFoundError",
    "AmbiguousDeclarationError",

    # Configuration
    "NamescopeConfig",
    "NamingConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
    "NamescopeLogger",
]
