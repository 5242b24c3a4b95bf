"""
Pagination constants for hardcoded engine behavior.

These values define the request contract of the pagination engine and should
NEVER be changed via environment variables or configuration. Defaults that
may be tuned per deployment live in pagination_engine/settings.py.
"""

# ============================================================================
# Page / Limit Bounds
# ============================================================================

# Smallest page number accepted by offset pagination (pages are 1-indexed)
MIN_PAGE = 1

# Bounds for the number of items per page, shared by both strategies
MIN_LIMIT = 1
MAX_LIMIT = 100


# ============================================================================
# Cursor Ordering
# ============================================================================

ORDERING_ASC = "asc"
ORDERING_DESC = "desc"


# ============================================================================
# Query Parameter Keys
# ============================================================================

PAGE_PARAM = "page"
LIMIT_PARAM = "limit"
CURSOR_PARAM = "cursor"
ORDERING_PARAM = "ordering"

# Keys consumed by each strategy; everything else is replayed on links
OFFSET_PARAM_KEYS = frozenset({PAGE_PARAM, LIMIT_PARAM})
CURSOR_PARAM_KEYS = frozenset({CURSOR_PARAM, ORDERING_PARAM, LIMIT_PARAM})


# ============================================================================
# Logging
# ============================================================================

# Maximum size of a single structured log line (Loki rejects larger entries)
LOKI_MAX_LOG_SIZE_BYTES = 256 * 1024
