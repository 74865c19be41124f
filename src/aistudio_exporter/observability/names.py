# src/aistudio_exporter/observability/names.py

"""Standard metric names for aistudio-exporter.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds.
"""

# ============================================================================
# Export Metrics
# ============================================================================

# Duration
EXPORT_DURATION = "export_duration"

# Counters
EXPORTS_TOTAL = "exports_total"
EXPORT_ERRORS_TOTAL = "export_errors_total"


# ============================================================================
# Writer Metrics
# ============================================================================

# Duration
TEXT_WRITE_DURATION = "text_write_duration"
SQLITE_WRITE_DURATION = "sqlite_write_duration"

# Counters
WRITER_OPERATIONS_TOTAL = "writer_operations_total"
CHUNKS_WRITTEN_TOTAL = "chunks_written_total"


# ============================================================================
# Input Metrics
# ============================================================================

# Gauges
INPUT_CHUNKS = "input_chunks"
