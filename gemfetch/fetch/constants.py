"""Constants for the fetch layer."""

# Redirect limit used when none is configured
DEFAULT_MAX_REDIRECTS = 10

# Transport defaults
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_READ_CHUNK_SIZE = 8192

# Component name for bound loggers
COMPONENT_FETCH = "fetch"
COMPONENT_TRANSPORT = "transport"
