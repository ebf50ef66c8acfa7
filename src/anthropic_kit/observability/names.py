# src/anthropic_kit/observability/names.py

"""Standard metric names for anthropic-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# HTTP API Metrics
# ============================================================================

# Duration (labels: operation, method)
API_REQUEST_DURATION = "anthropic_api_request_duration"

# Counters (labels: operation, status)
API_REQUESTS_TOTAL = "anthropic_api_requests_total"
API_ERRORS_TOTAL = "anthropic_api_errors_total"


# ============================================================================
# Streaming Metrics
# ============================================================================

# Duration from request to first event
STREAM_FIRST_EVENT_DURATION = "anthropic_stream_first_event_duration"

# Counters (labels: event)
STREAM_EVENTS_TOTAL = "anthropic_stream_events_total"
STREAM_TRUNCATIONS_TOTAL = "anthropic_stream_truncations_total"


# ============================================================================
# Pagination Metrics
# ============================================================================

# Counters
PAGES_FETCHED_TOTAL = "anthropic_pages_fetched_total"

# Gauges
PAGE_ITEMS = "anthropic_page_items"
