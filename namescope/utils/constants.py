"""
Constants for the namescope package.

This module consolidates the constant definitions used by the scope tree,
the naming policies and the ambient configuration layer.
"""

from __future__ import annotations


# =============================================================================
# Naming Constants
# =============================================================================

# Identifier returned when nothing usable survives sanitization
FALLBACK_NAME = "v"

# The only non-alphanumeric character allowed in identifiers
CONNECTOR = "_"

# Prefix used to escape reserved words and illegal leading characters
ESCAPE_PREFIX = CONNECTOR

# Upper bound on suffixed candidates tried for one name
MAX_UNIQUE_ATTEMPTS = 999

# Unicode replacement character produced by lossy decoding
REPLACEMENT_CHARACTER = "\ufffd"

# Surrogate range left behind by surrogateescape decoding
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF


# =============================================================================
# Profile Constants
# =============================================================================

DEFAULT_PROFILE = "go"
DEFAULT_KERNEL_NAME = "kernel"
DEFAULT_FX_PROFILE = "choreo"


# =============================================================================
# Configuration Constants
# =============================================================================

ENV_LOG_LEVEL = "NAMESCOPE_LOG_LEVEL"
ENV_CONFIG_FILE = "NAMESCOPE_CONFIG"
ENV_PROFILE = "NAMESCOPE_PROFILE"

# Generation-trigger hints consumed by the declaration locator
ENV_SOURCE_FILE = "NAMESCOPE_FILE"
ENV_SOURCE_LINE = "NAMESCOPE_LINE"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "namescope.log"
CONFIG_FILE_NAMES = ["namescope_config.yaml", "namescope_config.json"]

SOURCE_FILE_SUFFIX = ".py"
