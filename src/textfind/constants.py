#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textfind/constants.py
"""Constants and default values for textfind.

Defaults for search models and settings live here so that the options
classes, the find service and the command line tool agree on them.
"""

from __future__ import annotations

import re

# =============================================================================
# Search Model Defaults
# =============================================================================

DEFAULT_CASE_SENSITIVE = False
DEFAULT_WHOLE_WORDS_ONLY = False
DEFAULT_REGEX = False
DEFAULT_PRESERVE_CASE = False
DEFAULT_FORWARD = True

# =============================================================================
# Session Defaults
# =============================================================================

DEFAULT_MAX_HISTORY = 20

# =============================================================================
# Regular Expressions
# =============================================================================

# Flags every search pattern is compiled with, before case handling
REGEX_BASE_FLAGS = re.MULTILINE

# Size of the compiled pattern cache
PATTERN_CACHE_SIZE = 256

# =============================================================================
# Navigator Messages
# =============================================================================

NO_MORE_HIGHLIGHTS_MESSAGE = "No more highlights found"
SEARCH_AGAIN_FROM_TOP_MESSAGE = "{message}, search again to continue from the top"
SEARCH_AGAIN_FROM_BOTTOM_MESSAGE = "{message}, search again to continue from the bottom"

# =============================================================================
# Configuration
# =============================================================================

CONFIG_ENV_VAR = "TEXTFIND_CONFIG"
CONFIG_SECTION = "find"
