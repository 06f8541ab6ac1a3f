"""Shared constants for acpd.

This module contains constants that are used across multiple modules
to avoid duplication and ensure consistency.
"""

# =============================================================================
# Snapshot Locations (relative to the project root)
# =============================================================================

ACP_DIR = ".acp"

# Precomputed code intelligence snapshot
CACHE_FILE = ".acp/acp.cache.json"

# Optional variables file used by /vars/{name}/expand
VARS_FILE = ".acp/acp.vars.json"

# Optional daemon settings file
SETTINGS_FILE = ".acp/acpd.yaml"

# =============================================================================
# Server Defaults
# =============================================================================

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9222
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

DEFAULT_CORS_ORIGINS = ["*"]

# =============================================================================
# Primer Defaults
# =============================================================================

# Token budget used when the caller omits one (or sends garbage)
DEFAULT_PRIMER_BUDGET = 200

# Tier thresholds, applied to the budget left after the bootstrap block
STANDARD_TIER_MIN = 80
FULL_TIER_MIN = 300

# Spare budget required before project warnings are considered at all
WARNING_HEADROOM = 30

# Fixed estimated cost of one rendered warning line
WARNING_LINE_TOKENS = 15

MAX_WARNINGS = 3

# Characters of the constraint directive kept in a warning line
WARNING_DIRECTIVE_CHARS = 50

# Lock levels that produce project warnings
WARNING_LOCK_LEVELS = ("frozen", "restricted")

# =============================================================================
# Query Defaults
# =============================================================================

DEFAULT_MAP_DEPTH = 3
