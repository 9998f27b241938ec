# src/command_copy/observability/names.py

"""Standard metric names for command-copy observability.

Use these constants instead of hardcoded strings so every hook
implementation sees the same names.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Extraction Metrics
# ============================================================================

# Duration
EXTRACTION_DURATION = "extraction_duration"

# Counters
SNIPPETS_EXTRACTED = "snippets_extracted"
SNIPPET_LABEL_COLLISIONS = "snippet_label_collisions"


# ============================================================================
# Selection Metrics
# ============================================================================

# Duration
SELECTION_DURATION = "selection_duration"

# Counters
SELECTIONS_CANCELLED = "selections_cancelled"


# ============================================================================
# Placeholder Metrics
# ============================================================================

# Gauges
PLACEHOLDERS_FOUND = "placeholders_found"

# Duration
MATERIALIZE_DURATION = "materialize_duration"
