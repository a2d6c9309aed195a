"""
Canonical error_kind constants used across the project.

Purpose: Avoid brittle string literals scattered in the code and make
probe failures classify consistently.
"""

# URL probe error kinds
PROBE_OK = "ok"
PROBE_BAD_URL = "probe_bad_url"
PROBE_TIMEOUT = "probe_timeout"
PROBE_SSL = "probe_ssl_error"
PROBE_CONN_RESET = "probe_connection_reset"
PROBE_DNS_ERROR = "probe_dns_error"
PROBE_CONN_ERROR = "probe_connection_error"
PROBE_OTHER = "probe_other_error"

# Resolution outcome when nothing matched
INPUT_UNRECOGNIZED = "input_unrecognized"
