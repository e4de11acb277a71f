"""
Constants for the bpx client.
"""

# API Configuration
DEFAULT_BASE_URL = "https://api.backpack.exchange"
DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRY_DELAY = 1.0
DEFAULT_MAX_RETRIES = 3

# History search defaults, applied when decoding search parameters
DEFAULT_LIMIT = 100
DEFAULT_OFFSET = 0

USER_AGENT = "bpx-client/1.0"
API_KEY_HEADER = "X-API-Key"
