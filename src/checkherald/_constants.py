"""Shared constants for checkherald."""

# Default config file name for auto-discovery
DEFAULT_CONFIG = "checkherald.yaml"

# Directory holding JSON query definitions referenced by name in the query list
DEFAULT_QUERY_DIR = "/opt/checkherald/queries"

# Working directory for downloaded graph images
DEFAULT_SANDBOX_DIR = "/tmp/checkherald"

# Search window used when the check URL carries no ``from=`` offset
DEFAULT_QUERY_PERIOD = "10m"

# Window of the comparison graph attached next to the check's own graph
HISTORICAL_WINDOW = "24h"

# Every table, at every nesting level, is opened with this tag
TABLE_OPEN = "<table border='1' cellpadding='0' cellspacing='1'>"
TABLE_CLOSE = "</table>"

# Guard against malformed, pathologically deep backend responses
MAX_RENDER_DEPTH = 32

# Aggregation depth counting stops descending below this many levels
MAX_AGG_SCAN_DEPTH = 256

# Cell text for a value too deeply nested to serialise
TOO_DEEP_PLACEHOLDER = "[nested too deeply to display]"
